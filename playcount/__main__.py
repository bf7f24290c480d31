"""Entry point for ``python -m playcount``"""
import sys

from playcount.cli import main

if __name__ == "__main__":
    sys.exit(main())
