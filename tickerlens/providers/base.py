"""Base market data interface for tickerlens."""

from abc import ABC, abstractmethod
from datetime import date

from tickerlens.exceptions import MarketDataError
from tickerlens.models import PricePoint, Quote

__all__ = ["BaseMarketData", "MarketDataError", "Quote"]


class BaseMarketData(ABC):
    """Abstract base class for market data providers.

    Providers are the only place tickerlens performs I/O. Implementations
    must be safe to call from several threads at once, since the universe
    scanner fetches symbols in parallel.
    """

    @abstractmethod
    def get_quote(self, symbol: str) -> Quote:
        """Get the current quote for a symbol.

        Args:
            symbol: Trading symbol.

        Returns:
            Quote with current market data.

        Raises:
            MarketDataError: If no quote is available.
        """

    @abstractmethod
    def get_historical(
        self,
        symbol: str,
        from_date: date,
        to_date: date,
    ) -> list[PricePoint]:
        """Get daily OHLCV bars.

        Args:
            symbol: Trading symbol.
            from_date: Start date (inclusive).
            to_date: End date (inclusive).

        Returns:
            Bars ordered oldest to newest.

        Raises:
            MarketDataError: If history cannot be retrieved.
        """
