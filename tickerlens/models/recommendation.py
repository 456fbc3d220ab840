"""Recommendation data model."""

from enum import Enum

from pydantic import BaseModel, Field


class Signal(str, Enum):
    """Discrete signal class derived from the conviction score."""

    STRONG_SELL = "STRONG_SELL"
    SELL = "SELL"
    HOLD = "HOLD"
    BUY = "BUY"
    STRONG_BUY = "STRONG_BUY"

    @property
    def label(self) -> str:
        """Human readable label, e.g. ``STRONG BUY``."""
        return self.value.replace("_", " ")

    @property
    def is_actionable(self) -> bool:
        return self is not Signal.HOLD

    @property
    def is_bullish(self) -> bool:
        return self in (Signal.BUY, Signal.STRONG_BUY)

    @property
    def is_bearish(self) -> bool:
        return self in (Signal.SELL, Signal.STRONG_SELL)


class Recommendation(BaseModel):
    """Scored trading recommendation."""

    signal: Signal = Field(..., description="Signal class")
    score: int = Field(..., ge=0, le=100, description="Conviction score")
    reason: str = Field(..., description="Primary reason for the signal")

    model_config = {"frozen": True}
