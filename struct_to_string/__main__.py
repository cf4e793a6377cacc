"""Allow ``python -m struct_to_string``."""

import sys

from .cli import main

sys.exit(main())
