"""Market data providers for tickerlens."""

from tickerlens.providers.base import BaseMarketData, MarketDataError, Quote
from tickerlens.providers.file import JsonFileMarketData
from tickerlens.providers.memory import InMemoryMarketData

__all__ = [
    "BaseMarketData",
    "InMemoryMarketData",
    "JsonFileMarketData",
    "MarketDataError",
    "Quote",
]
