"""Moving averages and helpers for index-aligned indicator series.

Every series returned here has the same length as its input. Positions
before an indicator's minimum lookback hold ``None`` rather than a number,
and helpers that combine series propagate ``None``.
"""

from typing import Optional, Sequence

IndicatorSeries = list[Optional[float]]


def undefined(length: int) -> IndicatorSeries:
    """Return a series of ``length`` undefined values."""
    return [None] * length


def calculate_sma(prices: Sequence[float], period: int) -> IndicatorSeries:
    """Calculate Simple Moving Average.

    Args:
        prices: List of price values (typically close prices)
        period: Number of periods for the moving average

    Returns:
        List of SMA values. First (period-1) values will be None.
    """
    if len(prices) < period or period < 1:
        return undefined(len(prices))

    result = undefined(period - 1)

    for i in range(period - 1, len(prices)):
        window = prices[i - period + 1:i + 1]
        result.append(sum(window) / period)

    return result


def calculate_ema(prices: Sequence[float], period: int) -> IndicatorSeries:
    """Calculate Exponential Moving Average.

    The first defined value, at index ``period - 1``, is the simple average
    of the first ``period`` prices.

    Args:
        prices: List of price values
        period: Number of periods for the EMA

    Returns:
        List of EMA values. First (period-1) values will be None.
    """
    if len(prices) < period or period < 1:
        return undefined(len(prices))

    result = undefined(period - 1)
    multiplier = 2 / (period + 1)

    # First EMA is SMA
    ema = sum(prices[:period]) / period
    result.append(ema)

    for i in range(period, len(prices)):
        ema = (prices[i] - ema) * multiplier + ema
        result.append(ema)

    return result


def subtract(left: Sequence[Optional[float]], right: Sequence[Optional[float]]) -> IndicatorSeries:
    """Element-wise ``left - right``; undefined where either side is."""
    return [
        None if a is None or b is None else a - b
        for a, b in zip(left, right)
    ]


def defined_suffix(series: Sequence[Optional[float]]) -> tuple[int, list[float]]:
    """Split off the leading undefined run of a series.

    Returns:
        Tuple of (number of leading undefined positions, remaining values).
        The remaining values are expected to be fully defined.
    """
    offset = 0
    while offset < len(series) and series[offset] is None:
        offset += 1
    return offset, [v for v in series[offset:] if v is not None]


def latest(series: Sequence[Optional[float]], back: int = 0) -> Optional[float]:
    """Value ``back`` positions before the end, or None if missing/undefined."""
    index = len(series) - 1 - back
    if index < 0:
        return None
    return series[index]
