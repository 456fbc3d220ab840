"""Indicator result models.

Series are index-aligned with the input prices. ``None`` marks positions
where the indicator is undefined (not enough lookback yet).
"""

from typing import Optional

from pydantic import BaseModel, Field


class MACDResult(BaseModel):
    """MACD line, signal line and histogram."""

    macd_line: list[Optional[float]] = Field(..., description="Fast EMA minus slow EMA")
    signal_line: list[Optional[float]] = Field(..., description="EMA of the MACD line")
    histogram: list[Optional[float]] = Field(..., description="MACD line minus signal line")

    model_config = {"frozen": True}


class BollingerResult(BaseModel):
    """Upper, middle and lower Bollinger Bands."""

    upper: list[Optional[float]] = Field(..., description="Middle plus k standard deviations")
    middle: list[Optional[float]] = Field(..., description="Simple moving average")
    lower: list[Optional[float]] = Field(..., description="Middle minus k standard deviations")

    model_config = {"frozen": True}


class IndicatorSnapshot(BaseModel):
    """Latest indicator values for one symbol."""

    price: float = Field(..., description="Price the snapshot was scored against")
    sma: Optional[float] = Field(default=None, description="Latest trend SMA")
    rsi: Optional[float] = Field(default=None, description="Latest RSI")
    macd: Optional[float] = Field(default=None, description="Latest MACD line")
    macd_signal: Optional[float] = Field(default=None, description="Latest signal line")
    histogram: Optional[float] = Field(default=None, description="Latest histogram")
    previous_histogram: Optional[float] = Field(
        default=None, description="Histogram one bar earlier"
    )
    upper: Optional[float] = Field(default=None, description="Latest upper band")
    middle: Optional[float] = Field(default=None, description="Latest middle band")
    lower: Optional[float] = Field(default=None, description="Latest lower band")

    model_config = {"frozen": True}
