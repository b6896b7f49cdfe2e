"""Allow ``python -m sqltips``."""

import sys

from sqltips.cli import main

sys.exit(main())
