"""Exception types raised by tickerlens."""


class TickerlensError(Exception):
    """Base class for all tickerlens errors."""


class ConfigError(TickerlensError):
    """Raised when the configuration file cannot be read or validated."""


class MarketDataError(TickerlensError):
    """Raised by a market data provider when a quote or history is unavailable."""


class InsufficientDataError(TickerlensError):
    """Raised when there is not enough price history to analyze a symbol."""
