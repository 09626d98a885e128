"""Allow ``python -m bot_scoring``."""

import sys

from bot_scoring.cli import main

sys.exit(main())
