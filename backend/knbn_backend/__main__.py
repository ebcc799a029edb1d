"""Entry point for ``python -m knbn_backend``."""

import sys

from knbn_backend.cli import main

if __name__ == "__main__":
    sys.exit(main())
