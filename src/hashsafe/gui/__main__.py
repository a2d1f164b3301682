"""Entry point for running hashsafe GUI as a module."""

from __future__ import annotations

import sys

from . import main

if __name__ == "__main__":
    sys.exit(main())
