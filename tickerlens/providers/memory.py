"""In-memory market data provider for tests and offline analysis."""

from datetime import date
from typing import Optional

from tickerlens.exceptions import MarketDataError
from tickerlens.models import PricePoint, Quote
from tickerlens.providers.base import BaseMarketData


class InMemoryMarketData(BaseMarketData):
    """Serves quotes and bars from dictionaries keyed by symbol."""

    def __init__(
        self,
        quotes: Optional[dict[str, Quote]] = None,
        history: Optional[dict[str, list[PricePoint]]] = None,
    ):
        """Initialize the provider.

        Args:
            quotes: Quote per symbol.
            history: Bars per symbol, oldest first.
        """
        self._quotes = {s.upper(): q for s, q in (quotes or {}).items()}
        self._history = {s.upper(): list(h) for s, h in (history or {}).items()}

    def add_symbol(self, quote: Quote, history: list[PricePoint]) -> None:
        """Register a quote and its history under ``quote.symbol``."""
        symbol = quote.symbol.upper()
        self._quotes[symbol] = quote
        self._history[symbol] = list(history)

    def get_quote(self, symbol: str) -> Quote:
        try:
            return self._quotes[symbol.upper()]
        except KeyError:
            raise MarketDataError(f"No quote for {symbol.upper()}") from None

    def get_historical(
        self,
        symbol: str,
        from_date: date,
        to_date: date,
    ) -> list[PricePoint]:
        bars = self._history.get(symbol.upper(), [])
        return [b for b in bars if from_date <= b.date <= to_date]
