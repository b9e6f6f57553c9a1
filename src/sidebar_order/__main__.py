"""Allow ``python -m sidebar_order``."""

import sys

from sidebar_order.cli import main

sys.exit(main())
