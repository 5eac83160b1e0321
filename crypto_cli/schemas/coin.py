"""Pydantic models for the CoinPaprika payloads the CLI reads."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel


class Coin(BaseModel):
    """One entry of the ``/coins`` listing."""

    id: str
    name: str
    symbol: str
    rank: int


class CoinDetail(BaseModel):
    """Subset of ``/coins/{id}`` shown by ``coin-details``."""

    id: str
    name: str
    symbol: str
    description: Optional[str] = None
    rank: int


class MarketQuote(BaseModel):
    price: float


class Ticker(BaseModel):
    """Ticker for one coin, quotes keyed by upper-case currency code."""

    id: str
    name: str
    symbol: str
    rank: int
    quotes: Dict[str, MarketQuote] = {}

    def price_in(self, currency: str) -> Optional[float]:
        quote = self.quotes.get(currency.upper())
        if quote is None:
            return None
        return quote.price
