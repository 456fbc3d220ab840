"""Data models for tickerlens."""

from tickerlens.models.price import PricePoint
from tickerlens.models.quote import Quote
from tickerlens.models.indicator import BollingerResult, IndicatorSnapshot, MACDResult
from tickerlens.models.recommendation import Recommendation, Signal
from tickerlens.models.analysis import HealthMetrics, ScanResult, SymbolAnalysis

__all__ = [
    "BollingerResult",
    "HealthMetrics",
    "IndicatorSnapshot",
    "MACDResult",
    "PricePoint",
    "Quote",
    "Recommendation",
    "ScanResult",
    "Signal",
    "SymbolAnalysis",
]
