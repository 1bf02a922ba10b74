"""Allow running kv as ``python -m kv``."""

import sys

from .cli import main

sys.exit(main())
