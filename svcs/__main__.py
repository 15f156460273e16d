"""Allow running SVCS with ``python -m svcs``."""

import sys

from .app.cli import main

sys.exit(main())
