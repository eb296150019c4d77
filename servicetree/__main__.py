"""Module entrypoint for ``python -m servicetree``.

All argument parsing happens in ``servicetree.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
