"""Main CLI entry point for tlvframe."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from .inspector import inspect_file, inspect_list
from ..config import DEFAULT_CONFIG, STRICT_CONFIG
from ..exceptions import TlvError


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for CLI use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the tlvframe CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="tlvframe: Type-Length-Value framing codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tlvframe --inspect frames.bin          List the frames in a file
  tlvframe --list items.bin              Decode a list frame
  tlvframe --inspect frames.bin --strict Reject non-canonical headers
  tlvframe --version                     Show version
        """,
    )

    command = parser.add_mutually_exclusive_group()

    command.add_argument(
        "--inspect",
        metavar="FILE",
        type=str,
        help="List every frame in FILE with its offset, header and size",
    )

    command.add_argument(
        "--list",
        metavar="FILE",
        type=str,
        help="Decode the first frame of FILE as a list of frames",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Validate the type nibble and require canonical length widths",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"tlvframe {__version__}",
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    config = STRICT_CONFIG if args.strict else DEFAULT_CONFIG

    target = args.inspect or args.list
    if target is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    file_path = Path(target)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        if args.inspect:
            inspect_file(file_path, config)
        else:
            inspect_list(file_path, config)
        return 0
    except TlvError as e:
        print(f"Error decoding {file_path}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
