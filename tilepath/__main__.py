"""Allow ``python -m tilepath``."""

import sys

from .cli import main

sys.exit(main())
