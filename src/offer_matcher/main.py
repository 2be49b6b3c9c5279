"""Entry point for the offer matcher.

Usage:
    python -m offer_matcher buy --price 115 --count 20
    python -m offer_matcher --config config/offer_matcher.yaml sell --price 75 --count 20
    python -m offer_matcher --exchange http --url https://moex.ru/api buy -p 101.5 -n 3
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from offer_matcher.core.config import AppConfig, ExchangeType, load_config
from offer_matcher.domain.errors import TradingError
from offer_matcher.domain.offers import BuyCommand, SellCommand
from offer_matcher.exchange.factory import create_exchange
from offer_matcher.handlers.buy import BuyHandler
from offer_matcher.handlers.sell import SellHandler


def setup_logging(level: str, log_file: str | None = None) -> None:
    """Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to write logs to
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        handlers=handlers,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _positive_decimal(value: str) -> Decimal:
    try:
        price = Decimal(value)
    except InvalidOperation as err:
        raise argparse.ArgumentTypeError(f"invalid decimal value: {value!r}") from err
    if not price.is_finite() or price <= 0:
        raise argparse.ArgumentTypeError(f"price must be positive: {value!r}")
    return price


def _positive_int(value: str) -> int:
    try:
        count = int(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from err
    if count <= 0:
        raise argparse.ArgumentTypeError(f"count must be positive: {value!r}")
    return count


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Match buy/sell commands against exchange offers",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Path to configuration file",
    )

    parser.add_argument(
        "--exchange",
        "-e",
        choices=[t.value for t in ExchangeType],
        help="Exchange client to use (overrides config)",
    )

    parser.add_argument(
        "--url",
        "-u",
        type=str,
        help="Exchange endpoint (overrides config)",
    )

    parser.add_argument(
        "--log-level",
        "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Log file path",
    )

    subparsers = parser.add_subparsers(dest="action", required=True)
    for action in ("buy", "sell"):
        sub = subparsers.add_parser(action, help=f"{action.capitalize()} against offers")
        sub.add_argument(
            "--price",
            "-p",
            type=_positive_decimal,
            required=True,
            help="Limit price",
        )
        sub.add_argument(
            "--count",
            "-n",
            type=_positive_int,
            required=True,
            help="Quantity to fill",
        )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    """Build configuration from file and command line args.

    Args:
        args: Parsed command line arguments

    Returns:
        Merged configuration
    """
    config = load_config(args.config)

    if args.exchange:
        config.exchange.type = ExchangeType(args.exchange)

    if args.url:
        config.exchange.url = args.url

    if args.log_level:
        config.log_level = args.log_level

    if args.log_file:
        config.log_file = args.log_file

    return config


async def run_command(config: AppConfig, action: str, price: Decimal, count: int) -> int:
    """Run one buy or sell command against the configured exchange.

    Args:
        config: Application configuration
        action: "buy" or "sell"
        price: Limit price
        count: Quantity to fill

    Returns:
        Quantity filled
    """
    exchange = create_exchange(config.exchange)
    configuration = config.configuration()

    try:
        if action == "buy":
            return await BuyHandler(configuration, exchange).handle(
                BuyCommand(price=price, count=count)
            )
        return await SellHandler(configuration, exchange).handle(
            SellCommand(price=price, count=count)
        )
    finally:
        await exchange.disconnect()


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, config.log_file)

    logger = logging.getLogger(__name__)
    logger.info(f"Exchange: {config.exchange.type.value} at {config.exchange.url}")

    try:
        filled = asyncio.run(run_command(config, args.action, args.price, args.count))
    except TradingError as e:
        logger.error(f"{args.action} failed: {e}")
        return 1

    print(filled)
    return 0


if __name__ == "__main__":
    sys.exit(main())
