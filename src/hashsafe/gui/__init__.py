"""HashSafe GUI package."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from hashsafe.config import HashSafeConfig

try:
    from .app import HashSafeGUI
except ImportError:  # Python built without tkinter
    HashSafeGUI = None


def main(config_path: Optional[Path] = None, config: Optional[HashSafeConfig] = None) -> int:
    """
    Launch HashSafe GUI.

    Args:
        config_path: Optional path to config file
        config: Already loaded config (takes precedence over config_path)

    Returns:
        Exit code (0 for success)
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    if HashSafeGUI is None:
        print("This version was built without GUI support.", file=sys.stderr)
        print("Use --file to specify a file in CLI mode.", file=sys.stderr)
        return 1

    try:
        app = HashSafeGUI(config_path, config=config)
        app.run()
        return 0
    except Exception as e:
        print(f"Error starting GUI: {e}", file=sys.stderr)
        return 1


__all__ = ["HashSafeGUI", "main"]
