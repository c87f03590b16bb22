"""Module entry point for ``python -m mathmenu``."""

import sys

from mathmenu.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
