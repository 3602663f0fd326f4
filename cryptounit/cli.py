"""Inspect an amount in all of its representations.

Usage:
    python -m cryptounit inspect 1.5e5
    python -m cryptounit inspect --raw 15000000000000
    python -m cryptounit inspect -v -- -0.001234
"""

from __future__ import annotations

import argparse
import sys

import structlog

from cryptounit import codec
from cryptounit.errors import FormatError
from cryptounit.logconfig import configure_logging
from cryptounit.unit import CryptoUnit

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cryptounit",
        description="Inspect satoshi-scaled amounts",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show raw, decimal and buffer forms of an amount"
    )
    inspect_parser.add_argument("value", help="Decimal literal (e.g. 0.554, 1.5e5)")
    inspect_parser.add_argument(
        "--raw",
        action="store_true",
        help="Treat value as a raw satoshi integer instead of a decimal literal",
    )
    inspect_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def describe(unit: CryptoUnit) -> dict[str, str]:
    """Collect the textual representations of an amount."""
    buffer = unit.to_buffer().hex() if codec.fits_buffer(unit.value) else "n/a"
    return {
        "raw": unit.to_json(),
        "decimal": unit.to_decimal_string(),
        "buffer": buffer,
    }


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        unit = CryptoUnit(args.value) if args.raw else CryptoUnit.from_decimal(args.value)
    except FormatError as e:
        logger.debug("cli_invalid_value", value=args.value, raw=args.raw)
        print(f"error: {e}", file=sys.stderr)
        return 2

    for name, text in describe(unit).items():
        print(f"{name:<8} {text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
