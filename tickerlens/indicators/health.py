"""Heuristic health scores shown alongside the technical indicators.

All scores are clamped to 0-100.
"""

import math
from typing import Sequence

from tickerlens.models import HealthMetrics

# Assumed market cap when none is reported
FALLBACK_MARKET_CAP = 1e9


def _clamp(value: float, fallback: float) -> float:
    if not math.isfinite(value):
        value = fallback
    return max(0.0, min(100.0, value))


def calculate_liquidity_health(volume: float, market_cap: float) -> float:
    """Score daily turnover; higher is more liquid.

    A 0.5% daily turnover (volume relative to market cap) scores 100.
    """
    turnover_ratio = (volume * 100) / (market_cap or FALLBACK_MARKET_CAP)
    return _clamp(turnover_ratio * 200, fallback=50.0)


def calculate_drawdown_exposure(current_price: float, history: Sequence[float]) -> float:
    """Score the drawdown from the period high; higher is better.

    0% drawdown scores 100, 20% scores 50 and 40% or more scores 0.
    """
    if not history:
        return 0.0

    max_price = max(history)
    if max_price <= 0:
        return 0.0

    drawdown = ((max_price - current_price) / max_price) * 100
    return _clamp(100 - (drawdown * 2.5), fallback=0.0)


def calculate_risk_scores(change_percent: float) -> tuple[float, float]:
    """Concentration and diversification scores from the day's move.

    Returns:
        Tuple of (concentration, diversification). Larger moves lower both.
    """
    volatility_impact = abs(change_percent) * 10
    concentration = _clamp(100 - volatility_impact, fallback=50.0)
    diversification = _clamp(100 - (volatility_impact / 2), fallback=70.0)
    return concentration, diversification


def calculate_health_metrics(
    current_price: float,
    history: Sequence[float],
    volume: float,
    market_cap: float,
    change_percent: float,
) -> HealthMetrics:
    """Bundle all health scores for one symbol."""
    concentration, diversification = calculate_risk_scores(change_percent)
    return HealthMetrics(
        liquidity=calculate_liquidity_health(volume, market_cap),
        drawdown_exposure=calculate_drawdown_exposure(current_price, history),
        concentration=concentration,
        diversification=diversification,
    )
