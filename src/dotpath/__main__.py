"""Allow running as ``python -m dotpath``."""

import sys

from .cli import main

sys.exit(main())
