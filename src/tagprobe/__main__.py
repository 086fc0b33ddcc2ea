"""Allow ``python -m tagprobe``."""

import sys

from tagprobe.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
