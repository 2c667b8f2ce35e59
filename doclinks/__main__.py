"""Allow ``python -m doclinks``."""

import sys

from doclinks.cli import main

if __name__ == "__main__":
    sys.exit(main())
