"""Module entry point for ``python -m mupub``."""

import sys

from mupub.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
