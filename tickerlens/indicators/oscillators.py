"""Momentum oscillators: RSI and MACD."""

from typing import Sequence

from tickerlens.indicators.series import (
    IndicatorSeries,
    calculate_ema,
    defined_suffix,
    subtract,
    undefined,
)
from tickerlens.models import MACDResult

# Replaces a zero average loss so an all-gain window scores close to 100
RSI_EPSILON = 0.00001


def _rsi_value(avg_gain: float, avg_loss: float, epsilon: float) -> float:
    rs = avg_gain / (avg_loss if avg_loss != 0 else epsilon)
    return min(100.0, max(0.0, 100 - (100 / (1 + rs))))


def calculate_rsi(
    prices: Sequence[float],
    period: int = 14,
    epsilon: float = RSI_EPSILON,
) -> IndicatorSeries:
    """Calculate Relative Strength Index with Wilder smoothing.

    The averages are seeded with the plain mean of the first ``period``
    gains and losses, then smoothed as ``(avg * (period - 1) + current) / period``.
    A zero average loss is replaced by ``epsilon`` so that a window with no
    losses gives an RSI just under 100 instead of dividing by zero.

    Args:
        prices: List of price values (typically close prices)
        period: RSI period (default 14)
        epsilon: Stand-in for a zero average loss

    Returns:
        List of RSI values (0-100). First `period` values will be None.
    """
    if len(prices) <= period or period < 1:
        return undefined(len(prices))

    initial_gain = 0.0
    initial_loss = 0.0
    for i in range(1, period + 1):
        change = prices[i] - prices[i - 1]
        if change > 0:
            initial_gain += change
        else:
            initial_loss -= change

    avg_gain = initial_gain / period
    avg_loss = initial_loss / period

    result = undefined(period)
    result.append(_rsi_value(avg_gain, avg_loss, epsilon))

    for i in range(period + 1, len(prices)):
        change = prices[i] - prices[i - 1]
        current_gain = change if change > 0 else 0.0
        current_loss = -change if change < 0 else 0.0

        avg_gain = (avg_gain * (period - 1) + current_gain) / period
        avg_loss = (avg_loss * (period - 1) + current_loss) / period

        result.append(_rsi_value(avg_gain, avg_loss, epsilon))

    return result


def calculate_macd(
    prices: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> MACDResult:
    """Calculate MACD (Moving Average Convergence Divergence).

    The signal line is the EMA of the defined part of the MACD line, shifted
    right so it stays aligned with ``prices``.

    Args:
        prices: List of price values
        fast: Fast EMA period (default 12)
        slow: Slow EMA period (default 26)
        signal: Signal line period (default 9)

    Returns:
        MACDResult with macd_line, signal_line and histogram.
    """
    fast_ema = calculate_ema(prices, fast)
    slow_ema = calculate_ema(prices, slow)

    # MACD line = Fast EMA - Slow EMA
    macd_line = subtract(fast_ema, slow_ema)

    _, valid_macd = defined_suffix(macd_line)
    signal_ema = calculate_ema(valid_macd, signal)
    signal_line = undefined(len(macd_line) - len(signal_ema)) + signal_ema

    histogram = subtract(macd_line, signal_line)

    return MACDResult(
        macd_line=macd_line,
        signal_line=signal_line,
        histogram=histogram,
    )
