# crypto_cli/main.py
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

import httpx

from crypto_cli.config.settings import Settings, get_settings
from crypto_cli.services.coinpaprika import (
    CryptoCliError,
    build_client,
    fetch_coin_details,
    fetch_coins,
    fetch_ticker,
)
from crypto_cli.services.comparison import compare_coin_prices
from crypto_cli.utils.formatting import (
    render_banner,
    render_coin_details,
    render_coin_list,
    render_coin_price,
    render_comparison,
)


__version__ = "0.1.0"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("crypto_cli.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crypto-cli",
        description="A simple CLI to fetch cryptocurrency data",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP activity to stderr")
    parser.add_argument("--no-banner", action="store_true", help="Do not print the welcome banner")

    sub = parser.add_subparsers(dest="command", metavar="<command>")

    sub.add_parser("list-coins", help="Get the list of all coins")

    details = sub.add_parser("coin-details", help="Get details for a specific coin")
    details.add_argument("coin_id", help="Coin ID (e.g., btc-bitcoin)")

    price = sub.add_parser("coin-price", help="Get the price of a specific coin in a target currency")
    price.add_argument("coin_id", help="Coin ID (e.g., btc-bitcoin)")
    price.add_argument("target_currency", help="Target currency (e.g., usd, usdt, eth, doge)")

    compare = sub.add_parser("compare-coins", help="Compare the prices of two coins in a target currency")
    compare.add_argument("coin1_id", help="First coin ID (e.g., btc-bitcoin)")
    compare.add_argument("coin2_id", help="Second coin ID (e.g., eth-ethereum)")
    compare.add_argument("target_currency", help="Target currency (e.g., usd, usdt)")

    return parser


CommandResult = Tuple[List[str], int]


async def _list_coins(client: httpx.AsyncClient, args: argparse.Namespace) -> CommandResult:
    return render_coin_list(await fetch_coins(client)), 0


async def _coin_details(client: httpx.AsyncClient, args: argparse.Namespace) -> CommandResult:
    return render_coin_details(await fetch_coin_details(client, args.coin_id)), 0


async def _coin_price(client: httpx.AsyncClient, args: argparse.Namespace) -> CommandResult:
    ticker = await fetch_ticker(client, args.coin_id, args.target_currency)
    found = ticker.price_in(args.target_currency) is not None
    return render_coin_price(ticker, args.target_currency), 0 if found else 1


async def _compare_coins(client: httpx.AsyncClient, args: argparse.Namespace) -> CommandResult:
    comparison = await compare_coin_prices(client, args.coin1_id, args.coin2_id, args.target_currency)
    return render_comparison(comparison), 0


COMMANDS: Dict[str, Callable[[httpx.AsyncClient, argparse.Namespace], Awaitable[CommandResult]]] = {
    "list-coins": _list_coins,
    "coin-details": _coin_details,
    "coin-price": _coin_price,
    "compare-coins": _compare_coins,
}


async def run_command(args: argparse.Namespace, settings: Settings) -> CommandResult:
    """Execute one subcommand and return the lines to print with the exit code."""

    handler = COMMANDS[args.command]
    async with build_client(settings) as client:
        return await handler(client, args)


def _print_lines(lines: Sequence[str]) -> None:
    print("\n".join(lines))


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.LOG_LEVEL
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    _configure_logging(settings, args.verbose)

    if args.command is None:
        parser.print_help()
        return 2

    if settings.SHOW_BANNER and not args.no_banner:
        _print_lines(render_banner())

    logger.debug("running %s against %s", args.command, settings.COINPAPRIKA_BASE_URL)
    try:
        lines, code = asyncio.run(run_command(args, settings))
    except CryptoCliError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_lines(lines)
    return code


if __name__ == "__main__":
    sys.exit(main())
