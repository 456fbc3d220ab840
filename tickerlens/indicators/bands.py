"""Volatility bands."""

from typing import Sequence

from tickerlens.indicators.series import calculate_sma, undefined
from tickerlens.models import BollingerResult


def calculate_bollinger_bands(
    prices: Sequence[float],
    period: int = 20,
    std_dev: float = 2.0,
) -> BollingerResult:
    """Calculate Bollinger Bands.

    Uses the population standard deviation of the trailing window around
    the SMA middle band.

    Args:
        prices: List of price values
        period: SMA period (default 20)
        std_dev: Standard deviation multiplier (default 2.0)

    Returns:
        BollingerResult with upper, middle and lower bands.
    """
    middle_band = calculate_sma(prices, period)
    upper_band = undefined(len(prices))
    lower_band = undefined(len(prices))

    for i, mean in enumerate(middle_band):
        if mean is None:
            continue

        window = prices[i - period + 1:i + 1]
        variance = sum((x - mean) ** 2 for x in window) / period
        std = variance ** 0.5

        upper_band[i] = mean + (std_dev * std)
        lower_band[i] = mean - (std_dev * std)

    return BollingerResult(upper=upper_band, middle=middle_band, lower=lower_band)
