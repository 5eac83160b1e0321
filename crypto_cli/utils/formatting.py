"""Plain-text rendering for CLI output. Every helper returns a list of lines."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from crypto_cli.schemas.coin import Coin, CoinDetail, Ticker
from crypto_cli.services.comparison import PriceComparison


RULE = "=" * 39
WIDE_RULE = "=" * 57

BANNER = "\n".join(
    [
        WIDE_RULE,
        "█▀█ █▀█ █▀▀ █▀█ ▀█▀ █ █▀▀ ▀█▀ █ █▄ █ █▀▀ █▀█ ▀█▀ █▄ █ ",
        "█▄█ █▀▄ █▄▄ █▀▄  █  █ █▄▄  █  █ █ ▀█ ██▄ █▀▄  █  █ ▀█",
        WIDE_RULE,
        "Welcome to the Crypto CLI Tool".center(len(WIDE_RULE)).rstrip(),
        WIDE_RULE,
        "Fetch real-time cryptocurrency data like prices, details,",
        "compare coins, and more!",
        "",
        "Available Commands:",
        "  - list-coins                 -> Show a list of all coins",
        "  - coin-details <coin_id>     -> Show details for a specific coin",
        "  - coin-price <coin_id> <target_currency>",
        "                               -> Get the price of a coin in a target currency",
        "  - compare-coins <coin1_id> <coin2_id> <target_currency>",
        "                               -> Compare two coins",
        WIDE_RULE,
        "",
    ]
)


def render_banner() -> list[str]:
    return BANNER.split("\n")


def format_price(value: float) -> str:
    """
    Shortest round-trip decimal text for ``value``, never in scientific
    notation. Integral prices drop the trailing ``.0``.
    """
    return format(Decimal(repr(value)).normalize(), "f")


def _header(title: str, leading_blank: bool = True) -> list[str]:
    lines = [""] if leading_blank else []
    lines += [RULE, title.center(len(RULE)).rstrip(), RULE, ""]
    return lines


def render_coin_list(coins: Iterable[Coin]) -> list[str]:
    lines = _header("Listing All Coins", leading_blank=False)
    lines += [f"{c.name} ({c.symbol}) - Rank: {c.rank}" for c in coins]
    return lines


def render_coin_details(detail: CoinDetail) -> list[str]:
    lines = _header(f"Coin Details for {detail.name} ({detail.symbol})")
    lines += [
        f"Name: {detail.name}",
        f"Symbol: {detail.symbol}",
        f"Description: {detail.description or 'N/A'}",
        f"Rank: {detail.rank}",
    ]
    return lines


def render_price_not_found(name: str, currency: str) -> str:
    return f"Could not find price information for {name} in {currency.upper()}"


def render_coin_price(ticker: Ticker, currency: str) -> list[str]:
    cur = currency.upper()
    lines = _header(f"Price for {ticker.name} ({ticker.symbol}) in {cur}")
    price = ticker.price_in(cur)
    if price is None:
        lines.append(render_price_not_found(ticker.name, cur))
    else:
        lines.append(f"1 {ticker.name} ({ticker.symbol}) = {format_price(price)} {cur}")
    return lines


def render_comparison(comparison: PriceComparison) -> list[str]:
    c = comparison
    lines = _header(f"Comparing {c.coin1_id} and {c.coin2_id} in {c.currency} Currency")
    lines += [
        f"{c.coin1_id} price: {format_price(c.coin1_price)} {c.currency}",
        f"{c.coin2_id} price: {format_price(c.coin2_price)} {c.currency}",
    ]
    if c.winner is None:
        lines.append(f"Both {c.coin1_id} and {c.coin2_id} have the same value in {c.currency}")
    else:
        lines.append(f"{c.winner} is more valuable than {c.loser} in {c.currency}")
    return lines
