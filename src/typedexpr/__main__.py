"""Allow running the demonstration with ``python -m typedexpr``."""

import sys

from typedexpr.demo import main

sys.exit(main())
