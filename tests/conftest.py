"""Shared fixtures for tickerlens tests."""

from datetime import date, timedelta

import pytest

from tickerlens.models import PricePoint, Quote
from tickerlens.providers import InMemoryMarketData

AS_OF = date(2024, 6, 28)


def uptrend_then_pullback() -> list[float]:
    """60 closes: 54 days rising by 2 from 100, then 6 days falling by 5.

    Scores BUY (60): price above SMA50 (+10), RSI ~41.7 (+5),
    negative MACD histogram without a crossover (-5), inside the bands.
    """
    closes = [100.0 + 2 * i for i in range(54)]
    for _ in range(6):
        closes.append(closes[-1] - 5)
    return closes


def downtrend_then_bounce() -> list[float]:
    """Mirror image of ``uptrend_then_pullback``; scores SELL (40)."""
    return [400.0 - c for c in uptrend_then_pullback()]


def make_history(closes: list[float], as_of: date = AS_OF) -> list[PricePoint]:
    """Daily bars ending on ``as_of``, one per calendar day."""
    start = as_of - timedelta(days=len(closes) - 1)
    return [
        PricePoint(
            date=start + timedelta(days=i),
            open=close,
            high=close * 1.01,
            low=close * 0.99,
            close=close,
            volume=1_000_000,
        )
        for i, close in enumerate(closes)
    ]


def make_quote(symbol: str, closes: list[float], name: str = "") -> Quote:
    prev = closes[-2] if len(closes) > 1 else closes[-1]
    change = closes[-1] - prev
    return Quote(
        symbol=symbol,
        name=name,
        price=closes[-1],
        change=change,
        change_percent=change / prev * 100 if prev else 0.0,
        volume=1_000_000,
        market_cap=5e9,
    )


@pytest.fixture
def provider_factory():
    """Build an InMemoryMarketData from {symbol: closes}."""

    def _build(series: dict[str, list[float]], as_of: date = AS_OF) -> InMemoryMarketData:
        provider = InMemoryMarketData()
        for symbol, closes in series.items():
            provider.add_symbol(make_quote(symbol, closes), make_history(closes, as_of))
        return provider

    return _build
