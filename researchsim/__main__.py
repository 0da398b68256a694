"""Allow ``python -m researchsim``."""

import sys

from .cli import main

sys.exit(main())
