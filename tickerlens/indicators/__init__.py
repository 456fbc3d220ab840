"""Technical indicators module."""

from tickerlens.indicators.bands import calculate_bollinger_bands
from tickerlens.indicators.health import (
    calculate_drawdown_exposure,
    calculate_health_metrics,
    calculate_liquidity_health,
    calculate_risk_scores,
)
from tickerlens.indicators.oscillators import calculate_macd, calculate_rsi
from tickerlens.indicators.series import (
    IndicatorSeries,
    calculate_ema,
    calculate_sma,
    latest,
)

__all__ = [
    "IndicatorSeries",
    "calculate_bollinger_bands",
    "calculate_drawdown_exposure",
    "calculate_ema",
    "calculate_health_metrics",
    "calculate_liquidity_health",
    "calculate_macd",
    "calculate_risk_scores",
    "calculate_rsi",
    "calculate_sma",
    "latest",
]
