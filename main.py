#!/usr/bin/env python3
"""Financial application log generator — entry point."""

import sys

from finlog.cli import main

if __name__ == "__main__":
    sys.exit(main())
