# Path: keyseg/__main__.py
"""Allow `python -m keyseg`."""

import sys

from .main import main

sys.exit(main())
