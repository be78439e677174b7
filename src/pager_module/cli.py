#!/usr/bin/env python3
"""
Pager Module - Command Line Interface

Main entry point for the paging encoder.
Encodes FLEX and POCSAG pages into symbol files for a modulator.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__


def cmd_info(args: argparse.Namespace) -> int:
    """Display module information."""
    print(f"Pager Module v{__version__}")
    print()
    print("FLEX / POCSAG Paging Encoder")
    print("============================")
    print()
    print("Supported Protocols:")
    print("  - POCSAG: 512/1200/2400 baud, numeric and alphanumeric")
    print("  - FLEX: 1600 baud 2-level, numeric on short addresses")
    print()
    print("Output:")
    print("  - int8 symbols (+1 for bit 0, -1 for bit 1) at the symbol rate")
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode a page to symbols."""
    from .core.config import EncoderConfig, Protocol, get_preset
    from .core.errors import PagerEncodingError
    from .protocols.encoder import PagingEncoder

    try:
        if args.config:
            config = EncoderConfig.load(args.config)
            if config is None:
                print(f"Could not load configuration: {args.config}")
                return 1
        elif args.preset:
            config = get_preset(args.preset)
        else:
            config = EncoderConfig.load_default()
            if args.protocol == Protocol.FLEX.value and config.protocol != Protocol.FLEX:
                # POCSAG defaults are not a valid FLEX page
                config = get_preset("flex_1600")

        overrides = {
            "protocol": args.protocol,
            "baud_rate": args.baud,
            "symbol_rate": args.symbol_rate,
            "capcode": args.capcode,
            "message_type": args.type,
        }
        data = config.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})

        text = args.text
        if text is None and not sys.stdin.isatty():
            text = sys.stdin.read().strip() or None
        if text is not None:
            data["message"] = text

        config = EncoderConfig.from_dict(data)
        encoder = PagingEncoder(config)
    except PagerEncodingError as e:
        print(f"Error: {e}")
        return 1

    symbols = encoder.encode()

    print(
        f"Encoded {config.protocol.value.upper()} page for capcode {config.capcode} "
        f"({config.message_type.value}, {len(config.message)} characters)"
    )
    print(
        f"Generated {len(symbols)} symbols "
        f"({len(symbols) / config.symbol_rate:.3f}s at {config.symbol_rate} sym/s)"
    )

    if args.output:
        output_path = Path(args.output).expanduser().resolve()
        # Ensure parent directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if output_path.exists():
            print(f"Warning: Overwriting existing file: {output_path}")
        symbols.tofile(output_path)
        print(f"Saved to: {output_path}")

    if args.save_config:
        if not config.save(args.save_config):
            return 1

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="pager-encode",
        description="Pager Module - FLEX and POCSAG paging encoder",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Info command
    info_parser = subparsers.add_parser("info", help="Display module information")
    info_parser.set_defaults(func=cmd_info)

    # Encode command
    encode_parser = subparsers.add_parser("encode", help="Encode a page to symbols")
    encode_parser.add_argument(
        "text",
        nargs="?",
        help="Message text (reads stdin if omitted)",
    )
    encode_parser.add_argument(
        "-p",
        "--protocol",
        choices=["pocsag", "flex"],
        help="Paging protocol (default: pocsag)",
    )
    encode_parser.add_argument(
        "-c",
        "--capcode",
        type=int,
        help="Pager capcode (default: 425321)",
    )
    encode_parser.add_argument(
        "-t",
        "--type",
        choices=["numeric", "alpha"],
        help="Message type (default: alpha)",
    )
    encode_parser.add_argument(
        "--baud",
        type=int,
        help="Baud rate (default: 1600)",
    )
    encode_parser.add_argument(
        "--symbol-rate",
        type=int,
        help="Output symbol rate, a multiple of the baud rate (default: 6400)",
    )
    encode_parser.add_argument(
        "--preset",
        help="Start from a named preset (pocsag_512, pocsag_1200, flex_1600)",
    )
    encode_parser.add_argument(
        "--config",
        help="Load settings from a JSON configuration file",
    )
    encode_parser.add_argument(
        "--save-config",
        help="Save the effective settings to a JSON configuration file",
    )
    encode_parser.add_argument(
        "-o",
        "--output",
        help="Output file for int8 symbols",
    )
    encode_parser.set_defaults(func=cmd_encode)

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.command is None:
        # No command specified - show info
        return cmd_info(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
