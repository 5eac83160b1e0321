from __future__ import annotations

import httpx
import pytest

from conftest import BTC_TICKER, make_client, routes
from crypto_cli.config.settings import Settings
from crypto_cli.services import coinpaprika
from crypto_cli.services.coinpaprika import PriceNotFoundError, RequestFailedError


COINS = [
    {"id": "btc-bitcoin", "name": "Bitcoin", "symbol": "BTC", "rank": 1, "is_active": True, "type": "coin"},
    {"id": "eth-ethereum", "name": "Ethereum", "symbol": "ETH", "rank": 2, "is_active": True, "type": "coin"},
]


@pytest.mark.asyncio
async def test_fetch_coins_keeps_api_order():
    async with make_client(routes({"/coins": COINS})) as client:
        coins = await coinpaprika.fetch_coins(client)

    assert [c.id for c in coins] == ["btc-bitcoin", "eth-ethereum"]
    assert coins[1].rank == 2


@pytest.mark.asyncio
async def test_fetch_coin_details_allows_null_description():
    detail = {"id": "x-coin", "name": "X", "symbol": "X", "rank": 0, "description": None}
    async with make_client(routes({"/coins/x-coin": detail})) as client:
        result = await coinpaprika.fetch_coin_details(client, "x-coin")

    assert result.description is None
    assert result.rank == 0


@pytest.mark.asyncio
async def test_fetch_ticker_requests_upper_case_quote():
    calls: list[httpx.Request] = []
    async with make_client(routes({"/tickers/btc-bitcoin": BTC_TICKER}, calls)) as client:
        ticker = await coinpaprika.fetch_ticker(client, "btc-bitcoin", "usd")

    assert calls[0].url.params["quotes"] == "USD"
    assert ticker.price_in("usd") == 64250.5
    assert ticker.price_in("eur") is None


@pytest.mark.asyncio
async def test_fetch_price_missing_quote():
    async with make_client(routes({"/tickers/btc-bitcoin": BTC_TICKER})) as client:
        with pytest.raises(PriceNotFoundError) as info:
            await coinpaprika.fetch_price(client, "btc-bitcoin", "doge")

    assert str(info.value) == "Could not find price information for btc-bitcoin in DOGE"
    assert info.value.currency == "DOGE"


@pytest.mark.asyncio
async def test_http_error_carries_api_message():
    async with make_client(routes({})) as client:
        with pytest.raises(RequestFailedError) as info:
            await coinpaprika.fetch_coin_details(client, "nope-coin")

    message = str(info.value)
    assert "404" in message
    assert "id not found" in message


@pytest.mark.asyncio
async def test_invalid_json_is_request_failure():
    table = {"/coins": httpx.Response(200, text="<html>maintenance</html>")}
    async with make_client(routes(table)) as client:
        with pytest.raises(RequestFailedError, match="not valid JSON"):
            await coinpaprika.fetch_coins(client)


@pytest.mark.asyncio
async def test_schema_mismatch_is_request_failure():
    table = {"/tickers/btc-bitcoin": {"id": "btc-bitcoin", "name": "Bitcoin"}}
    async with make_client(routes(table)) as client:
        with pytest.raises(RequestFailedError, match="Unexpected payload"):
            await coinpaprika.fetch_ticker(client, "btc-bitcoin", "usd")


@pytest.mark.asyncio
async def test_transport_error_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(RequestFailedError) as info:
            await coinpaprika.fetch_coins(client)

    assert isinstance(info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_build_client_uses_settings():
    s = Settings(
        COINPAPRIKA_BASE_URL="https://example.invalid/v1",
        COINPAPRIKA_TIMEOUT_SECONDS=3.0,
        LOG_LEVEL="WARNING",
        SHOW_BANNER=False,
    )
    async with coinpaprika.build_client(s) as client:
        assert str(client.base_url) == "https://example.invalid/v1/"
        assert client.timeout.read == 3.0
        assert client.headers["accept"] == "application/json"


@pytest.mark.asyncio
async def test_unbuildable_url_is_request_failure():
    async with make_client(routes({})) as client:
        with pytest.raises(RequestFailedError) as info:
            await coinpaprika.fetch_coin_details(client, "btc\x01bitcoin")

    assert isinstance(info.value.__cause__, httpx.InvalidURL)
