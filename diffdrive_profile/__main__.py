"""
Main entry point when running the diffdrive_profile module with python -m.
"""

import sys

from .cli import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
