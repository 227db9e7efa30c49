"""CLI: python -m src.calculator [FILE]"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from src.calculator.dispatcher import CommandDispatcher
from src.core.domain.config import DEFAULT_FRACTION_BITS, DEFAULT_PRECISION, ArithmeticConfig
from src.core.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.calculator",
        description="Arbitrary-precision decimal calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  echo "ADD 2 3" | python -m src.calculator
  python -m src.calculator --precision 10 commands.txt
        """,
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="File with commands (default: stdin)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help=f"Fractional digit-groups for DIV/SQRT/POW (default: {DEFAULT_PRECISION})",
    )
    parser.add_argument(
        "--fraction-bits",
        type=int,
        default=DEFAULT_FRACTION_BITS,
        help=f"Binary digits of fractional exponents (default: {DEFAULT_FRACTION_BITS})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr diagnostics (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        config = ArithmeticConfig(
            precision=args.precision, fraction_bits=args.fraction_bits
        )
    except ValidationError as e:
        parser.error(f"invalid configuration: {e}")

    dispatcher = CommandDispatcher(config)
    if args.input is None:
        dispatcher.run_stream(sys.stdin, sys.stdout)
    else:
        with open(args.input, "r", encoding="utf-8") as f:
            dispatcher.run_stream(f, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
