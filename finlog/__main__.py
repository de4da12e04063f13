import sys

from finlog.cli import main

sys.exit(main())
