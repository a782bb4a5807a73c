"""Main CLI entry point for tfsattrs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .. import __version__
from ..codec import decode, encode
from ..exceptions import TfsAttrsError
from ..framing import from_hex, to_hex
from ..visualize import pretty_visualize, visualize


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the tfsattrs CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="tfsattrs",
        description="tfsattrs: Item Attribute Stream Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tfsattrs --hex 0F05                       Show decoded attributes
  tfsattrs --file item.attributes --pretty  Decode a raw attributes file
  tfsattrs --hex 0C05 --reencode            Print the re-encoded hex
  tfsattrs --file item.attributes --check   Verify byte-exact round trip
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--hex", metavar="HEX", type=str, help="Attribute stream as hex text")
    source.add_argument("--file", metavar="FILE", type=str, help="Raw attribute stream file")

    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    parser.add_argument(
        "--reencode", action="store_true", help="Print the re-encoded stream as hex"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if re-encoding doesn't reproduce the input",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"tfsattrs {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.hex is None and args.file is None:
        parser.print_help()
        return 0

    try:
        if args.file is not None:
            file_path = Path(args.file)
            if not file_path.exists():
                print(f"Error: File not found: {file_path}", file=sys.stderr)
                return 1
            data = file_path.read_bytes()
        else:
            data = from_hex(args.hex)

        item = decode(data)

        if args.check or args.reencode:
            encoded = encode(item)
            if args.reencode:
                print(to_hex(encoded))
            if args.check:
                # The stream may end with the sentinel, which encode() omits
                if data not in (encoded, encoded + b"\x00"):
                    print("Error: re-encoded stream differs from input", file=sys.stderr)
                    return 1
                if not args.reencode:
                    print("OK")
            return 0

        print(pretty_visualize(item) if args.pretty else visualize(item))
        return 0
    except TfsAttrsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
