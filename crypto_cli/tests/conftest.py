from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from crypto_cli.config import settings as settings_module


BASE_URL = "https://api.test/v1"

BTC_TICKER = {
    "id": "btc-bitcoin",
    "name": "Bitcoin",
    "symbol": "BTC",
    "rank": 1,
    "circulating_supply": 19_500_000,
    "quotes": {"USD": {"price": 64250.5, "volume_24h": 1.2e10}},
}

ETH_TICKER = {
    "id": "eth-ethereum",
    "name": "Ethereum",
    "symbol": "ETH",
    "rank": 2,
    "quotes": {"USD": {"price": 3100.25}},
}


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)


def routes(table: dict[str, Any], calls: list[httpx.Request] | None = None):
    """Handler answering ``table[path]`` as JSON, 404 for unknown paths."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        path = request.url.path.removeprefix("/v1")
        if path not in table:
            return httpx.Response(404, json={"error": "id not found"})
        body = table[path]
        if isinstance(body, httpx.Response):
            return body
        return httpx.Response(200, json=body)

    return handler


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("COINPAPRIKA_BASE_URL", "COINPAPRIKA_TIMEOUT_SECONDS", "CRYPTO_CLI_LOG_LEVEL", "CRYPTO_CLI_BANNER"):
        monkeypatch.delenv(name, raising=False)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()
