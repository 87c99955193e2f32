"""Entry point for ``python -m islandmap``."""

import sys

from .cli import main

sys.exit(main())
