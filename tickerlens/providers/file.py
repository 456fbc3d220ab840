"""Market data provider backed by a directory of JSON files.

Each symbol is stored as ``<directory>/<SYMBOL>.json``::

    {
        "quote": {"symbol": "AAPL", "name": "Apple Inc.", "price": 190.1,
                  "change": 1.2, "change_percent": 0.63,
                  "volume": 51000000, "market_cap": 2.9e12},
        "history": [
            {"date": "2024-01-02", "open": 187.1, "high": 188.4,
             "low": 183.9, "close": 185.6, "volume": 82488700},
            ...
        ]
    }
"""

import json
import re
from datetime import date
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from tickerlens.exceptions import MarketDataError
from tickerlens.models import PricePoint, Quote
from tickerlens.providers.base import BaseMarketData

# Ticker characters only; no path separators or leading dots
SYMBOL_PATTERN = re.compile(r"[A-Za-z0-9^][A-Za-z0-9.^=-]*")


class SymbolFile(BaseModel):
    """Contents of one symbol file."""

    quote: Quote
    history: list[PricePoint] = Field(default_factory=list)


class JsonFileMarketData(BaseMarketData):
    """Reads quotes and daily bars from JSON files."""

    def __init__(self, directory: Path):
        self._directory = Path(directory)

    def _path(self, symbol: str) -> Path:
        if not SYMBOL_PATTERN.fullmatch(symbol):
            raise MarketDataError(f"Invalid symbol: {symbol!r}")
        return self._directory / f"{symbol.upper()}.json"

    def _load(self, symbol: str) -> SymbolFile:
        path = self._path(symbol)
        try:
            raw = json.loads(path.read_text())
        except FileNotFoundError:
            raise MarketDataError(f"No data file for {symbol.upper()} in {self._directory}") from None
        except (OSError, json.JSONDecodeError) as e:
            raise MarketDataError(f"Could not read {path}: {e}") from e

        try:
            return SymbolFile.model_validate(raw)
        except ValidationError as e:
            raise MarketDataError(f"Invalid data in {path}: {e}") from e

    def get_quote(self, symbol: str) -> Quote:
        return self._load(symbol).quote

    def get_historical(
        self,
        symbol: str,
        from_date: date,
        to_date: date,
    ) -> list[PricePoint]:
        bars = sorted(self._load(symbol).history, key=lambda b: b.date)
        return [b for b in bars if from_date <= b.date <= to_date]
