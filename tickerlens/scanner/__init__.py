"""Universe scanning."""

from tickerlens.config import DEFAULT_UNIVERSE
from tickerlens.scanner.universe import scan_symbol, scan_universe

__all__ = ["DEFAULT_UNIVERSE", "scan_symbol", "scan_universe"]
