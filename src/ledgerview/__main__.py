"""Allow running the CLI as ``python -m ledgerview``."""
import sys

from .cli import main

sys.exit(main())
