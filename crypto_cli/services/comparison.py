from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from crypto_cli.services.coinpaprika import fetch_price


@dataclass(frozen=True)
class PriceComparison:
    coin1_id: str
    coin2_id: str
    currency: str
    coin1_price: float
    coin2_price: float

    @property
    def winner(self) -> Optional[str]:
        if self.coin1_price > self.coin2_price:
            return self.coin1_id
        if self.coin1_price < self.coin2_price:
            return self.coin2_id
        return None

    @property
    def loser(self) -> Optional[str]:
        winner = self.winner
        if winner is None:
            return None
        return self.coin2_id if winner == self.coin1_id else self.coin1_id


async def compare_coin_prices(
    client: httpx.AsyncClient,
    coin1_id: str,
    coin2_id: str,
    target_currency: str,
) -> PriceComparison:
    # coin1 is always requested first
    coin1_price = await fetch_price(client, coin1_id, target_currency)
    coin2_price = await fetch_price(client, coin2_id, target_currency)
    return PriceComparison(
        coin1_id=coin1_id,
        coin2_id=coin2_id,
        currency=target_currency.upper(),
        coin1_price=coin1_price,
        coin2_price=coin2_price,
    )
