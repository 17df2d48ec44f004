"""Allow ``python -m decomment PATH``."""

import sys

from decomment.cli import main

sys.exit(main())
