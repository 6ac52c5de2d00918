#!/usr/bin/env python3
"""
Pair Quote Script: Token Amount Conversion

Converts an amount between the two tokens of a pair at a fixed rate.
Input: amount in the smallest unit of the input token (or of the output token with --inverse)
Output: converted amount in the smallest unit of the other token, printed on stdout
"""

import argparse
import sys

from loguru import logger
from pydantic import ValidationError as ConfigValidationError

from src.core.exceptions.rates import PairRateException
from src.core.models.pair_config import PairRateConfig
from src.infrastructure.pricing import PairQuoter


def setup_logging(debug: bool = False):
    """Configure logging with loguru."""
    logger.remove()

    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        ),
        level=level,
    )


def load_config(args: argparse.Namespace) -> PairRateConfig:
    """Build the pair configuration from a JSON file or command line flags."""
    if args.config:
        return PairRateConfig.from_json_file(args.config)

    return PairRateConfig(
        input_token=args.input_token,
        output_token=args.output_token,
        rate_in=args.rate[0],
        rate_out=args.rate[1],
        decimals_in=args.decimals[0],
        decimals_out=args.decimals[1],
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert token amounts at a fixed pair rate",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python quote_pair.py --rate 10 19 --decimals 24 24 --amount 1000000000000000000000000
  python quote_pair.py --rate 1 3000 --decimals 18 6 --amount 10**18
  python quote_pair.py --config pair.json --amount 1000000 --inverse
        """,
    )

    parser.add_argument("--input-token", type=str, default="TOKEN_A", help="Input token label")
    parser.add_argument("--output-token", type=str, default="TOKEN_B", help="Output token label")
    parser.add_argument(
        "--rate",
        nargs=2,
        type=int,
        default=[1, 1],
        metavar=("RATE_IN", "RATE_OUT"),
        help="Rate ratio: RATE_IN input tokens equal RATE_OUT output tokens (default: 1 1)",
    )
    parser.add_argument(
        "--decimals",
        nargs=2,
        type=int,
        default=[18, 18],
        metavar=("DECIMALS_IN", "DECIMALS_OUT"),
        help="Token decimals (default: 18 18)",
    )
    parser.add_argument("--config", type=str, help="JSON file with the pair configuration")
    parser.add_argument(
        "--amount",
        type=str,
        required=True,
        help="Amount in smallest units; accepts underscores and powers such as 10**18",
    )
    parser.add_argument(
        "--inverse", action="store_true", help="Treat --amount as an output amount"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    setup_logging(args.debug)

    try:
        amount = parse_amount(args.amount)
        quoter = PairQuoter.from_config(load_config(args))
        logger.info(quoter.display_rate())

        if args.inverse:
            result = quoter.quote_input(amount)
        else:
            result = quoter.quote_output(amount)

        print(result)
        return 0

    except (PairRateException, ConfigValidationError, ValueError, OSError) as e:
        logger.error(f"Quote failed: {e}")
        return 1


def parse_amount(text: str) -> int:
    """Parse an integer amount, allowing underscores and a single power term.

    Raises:
        ValueError: If text is not an integer expression
    """
    cleaned = text.replace("_", "").strip()
    if "**" in cleaned:
        base, exponent = (int(part) for part in cleaned.split("**", 1))
        if not 0 <= exponent <= 128:
            raise ValueError(f"Exponent out of range: {exponent}")
        return base**exponent
    return int(cleaned)


if __name__ == "__main__":
    sys.exit(main())
