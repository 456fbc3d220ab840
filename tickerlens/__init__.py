"""tickerlens - technical indicators, signal scoring and universe scanning."""

__version__ = "0.1.0"
