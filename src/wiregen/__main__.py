"""Entry point for ``python -m wiregen``."""

import sys

from wiregen.presentation.cli import main

sys.exit(main())
