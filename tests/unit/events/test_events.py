"""Tests for the change-notification emitter."""

from __future__ import annotations

import unittest

from servicetree.events import EventEmitter


class EventEmitterTests(unittest.TestCase):
    def test_fire_reaches_listeners_in_subscription_order(self) -> None:
        emitter: EventEmitter[str | None] = EventEmitter()
        seen: list[tuple[str, str | None]] = []
        emitter.subscribe(lambda payload: seen.append(("a", payload)))
        emitter.subscribe(lambda payload: seen.append(("b", payload)))

        emitter.fire("hello1")
        emitter.fire(None)

        self.assertEqual(seen, [("a", "hello1"), ("b", "hello1"), ("a", None), ("b", None)])

    def test_unsubscribe_stops_delivery_and_is_repeatable(self) -> None:
        emitter: EventEmitter[int] = EventEmitter()
        seen: list[int] = []
        unsubscribe = emitter.subscribe(seen.append)
        emitter.fire(1)
        unsubscribe()
        unsubscribe()
        emitter.fire(2)
        self.assertEqual(seen, [1])
        self.assertEqual(emitter.listener_count, 0)

    def test_listener_error_propagates_to_fire_caller(self) -> None:
        emitter: EventEmitter[int] = EventEmitter()

        def broken(_payload: int) -> None:
            raise RuntimeError("listener failed")

        emitter.subscribe(broken)
        with self.assertRaisesRegex(RuntimeError, "listener failed"):
            emitter.fire(1)

    def test_dispose_drops_listeners_and_rejects_new_ones(self) -> None:
        emitter: EventEmitter[int] = EventEmitter()
        seen: list[int] = []
        emitter.subscribe(seen.append)
        emitter.dispose()
        emitter.fire(1)
        self.assertEqual(seen, [])
        with self.assertRaises(RuntimeError):
            emitter.subscribe(seen.append)


if __name__ == "__main__":
    unittest.main()
