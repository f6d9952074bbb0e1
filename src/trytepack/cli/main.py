"""Main CLI entry point for trytepack."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..config import CodecConfig
from ..exceptions import TrytepackError
from ..utils.sizing import SUPPORTED_TRIT_SIZES
from .commands import decode_hex, encode_text, print_sizes, random_text


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the trytepack CLI."""
    parser = argparse.ArgumentParser(
        prog="trytepack",
        description="trytepack: Compact Tryte Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  trytepack encode AB9C --size 27        Pack a human-readable string
  trytepack decode 010203000000 --size 27 Unpack hex back to text
  trytepack random --size 81 --seed 7    Generate a random sequence
  trytepack sizes                        Show sizes per trit count
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"trytepack {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    # Options shared by every sequence command
    size_parser = argparse.ArgumentParser(add_help=False)
    size_parser.add_argument(
        "--size",
        type=int,
        default=243,
        choices=SUPPORTED_TRIT_SIZES,
        help="Sequence size in trits (default 243)",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser(
        "encode", parents=[size_parser], help="Pack a human-readable string to hex"
    )
    encode_parser.add_argument("text", help="String over the alphabet '9', 'A'-'Z'")
    encode_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject characters outside the alphabet",
    )

    decode_parser = subparsers.add_parser(
        "decode", parents=[size_parser], help="Unpack hex to a human-readable string"
    )
    decode_parser.add_argument("hex", help="Packed bytes as hex")

    random_parser = subparsers.add_parser(
        "random", parents=[size_parser], help="Generate a random sequence"
    )
    random_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    subparsers.add_parser("sizes", help="Show sizes per trit count")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the trytepack CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    if args.command == "sizes":
        print_sizes()
        return 0

    try:
        config = CodecConfig(
            trit_size=args.size,
            strict=getattr(args, "strict", False),
            seed=getattr(args, "seed", None),
        )
        if args.command == "encode":
            print(encode_text(args.text, config))
        elif args.command == "decode":
            print(decode_hex(args.hex, config))
        elif args.command == "random":
            print(random_text(config))
        return 0
    except (TrytepackError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
