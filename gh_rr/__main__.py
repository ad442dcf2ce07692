"""Allow ``python -m gh_rr``."""

import sys

from gh_rr.main import main

if __name__ == "__main__":
    sys.exit(main())
