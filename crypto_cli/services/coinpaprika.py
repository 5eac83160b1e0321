"""Helpers for interacting with the public CoinPaprika API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from crypto_cli.config.settings import Settings, get_settings
from crypto_cli.schemas.coin import Coin, CoinDetail, Ticker


logger = logging.getLogger("crypto_cli.coinpaprika")

_COIN_LIST = TypeAdapter(list[Coin])


class CryptoCliError(Exception):
    """Base class for errors surfaced to the user."""


class RequestFailedError(CryptoCliError):
    """The API could not be reached or answered with something unusable."""


class PriceNotFoundError(CryptoCliError):
    def __init__(self, coin_id: str, currency: str) -> None:
        self.coin_id = coin_id
        self.currency = currency.upper()
        super().__init__(f"Could not find price information for {coin_id} in {self.currency}")


def build_client(settings: Settings | None = None) -> httpx.AsyncClient:
    s = settings or get_settings()
    return httpx.AsyncClient(
        base_url=s.COINPAPRIKA_BASE_URL,
        timeout=s.COINPAPRIKA_TIMEOUT_SECONDS,
        headers={"Accept": "application/json"},
    )


def _error_detail(response: httpx.Response) -> str:
    # CoinPaprika answers errors with {"error": "..."}
    try:
        body = response.json()
    except ValueError:
        return ""
    if isinstance(body, dict) and body.get("error"):
        return f": {body['error']}"
    return ""


async def _get_json(
    client: httpx.AsyncClient,
    path: str,
    params: dict[str, str] | None = None,
) -> Any:
    logger.debug("GET %s params=%s", path, params)
    try:
        response = await client.get(path, params=params)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise RequestFailedError(f"Request to {path!r} failed: {exc}") from exc

    logger.debug("GET %s -> %s", path, response.status_code)
    if response.is_error:
        raise RequestFailedError(
            f"Request to {path} failed with status {response.status_code}{_error_detail(response)}"
        )

    try:
        return response.json()
    except ValueError as exc:
        raise RequestFailedError(f"Response from {path} is not valid JSON") from exc


async def fetch_coins(client: httpx.AsyncClient) -> list[Coin]:
    data = await _get_json(client, "/coins")
    try:
        coins = _COIN_LIST.validate_python(data)
    except ValidationError as exc:
        raise RequestFailedError(f"Unexpected payload from /coins: {exc.error_count()} invalid field(s)") from exc
    logger.info("fetched %s coins", len(coins))
    return coins


async def fetch_coin_details(client: httpx.AsyncClient, coin_id: str) -> CoinDetail:
    path = f"/coins/{coin_id}"
    data = await _get_json(client, path)
    try:
        return CoinDetail.model_validate(data)
    except ValidationError as exc:
        raise RequestFailedError(f"Unexpected payload from {path}: {exc.error_count()} invalid field(s)") from exc


async def fetch_ticker(client: httpx.AsyncClient, coin_id: str, target_currency: str) -> Ticker:
    """
    Fetch the ticker of ``coin_id`` quoted in ``target_currency``.

    The API only returns USD unless other quotes are asked for explicitly.
    """
    path = f"/tickers/{coin_id}"
    data = await _get_json(client, path, params={"quotes": target_currency.upper()})
    try:
        return Ticker.model_validate(data)
    except ValidationError as exc:
        raise RequestFailedError(f"Unexpected payload from {path}: {exc.error_count()} invalid field(s)") from exc


async def fetch_price(client: httpx.AsyncClient, coin_id: str, target_currency: str) -> float:
    ticker = await fetch_ticker(client, coin_id, target_currency)
    price = ticker.price_in(target_currency)
    if price is None:
        raise PriceNotFoundError(coin_id, target_currency)
    return price
