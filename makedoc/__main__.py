"""Allow running makedoc with python -m makedoc."""

import sys

from makedoc.cli import main

if __name__ == "__main__":
    sys.exit(main())
