"""Command line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from hashsafe import __version__
from hashsafe.config import DEFAULT_CONFIG_PATH, HashSafeConfig, load_config
from hashsafe.constants import RESULT_PREFIX
from hashsafe.io.hash import describe_io_error, sha256_file


def _configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


def _run_cli(file_path: Path, config: HashSafeConfig) -> int:
    print(f"Calculating hash for: {file_path}")
    try:
        digest = sha256_file(file_path, chunk_size=config.hash.chunk_size)
    except OSError as e:
        logging.debug("Hashing %s failed: %r", file_path, e)
        print(f"Error calculating hash: {describe_io_error(e)}", file=sys.stderr)
        return 1
    print(f"{RESULT_PREFIX}{digest}")
    return 0


def _run_gui(config: HashSafeConfig) -> int:
    # Imported lazily so CLI runs never touch tkinter
    from hashsafe.gui import main as gui_main

    return gui_main(config=config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashsafe",
        description="Calculate and display the SHA-256 hash of a file.",
    )
    parser.add_argument("-f", "--file", help="path to the file to hash")
    parser.add_argument("-c", "--cli", action="store_true", help="force command line mode")
    parser.add_argument(
        "--config", default=str(DEFAULT_CONFIG_PATH), help="path to config TOML"
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.debug)

    try:
        config = load_config(Path(args.config))
    except ValueError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.cli or args.file is not None:
        if args.file is None:
            print("In CLI mode, you must specify a file with --file", file=sys.stderr)
            return 1
        return _run_cli(Path(args.file), config)

    return _run_gui(config)


if __name__ == "__main__":
    raise SystemExit(main())
