"""Allow ``python -m mutoracle``."""

import sys

from mutoracle.cli import main

sys.exit(main())
