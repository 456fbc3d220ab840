"""Daily price bar (OHLCV) data model."""

from datetime import date as Date

from pydantic import BaseModel, Field


class PricePoint(BaseModel):
    """Represents a single daily OHLCV bar."""

    date: Date = Field(..., description="Trading day")
    open: float = Field(default=0.0, ge=0, description="Opening price")
    high: float = Field(default=0.0, ge=0, description="High price")
    low: float = Field(default=0.0, ge=0, description="Low price")
    close: float = Field(..., ge=0, description="Closing price")
    volume: int = Field(default=0, ge=0, description="Trading volume")

    model_config = {"frozen": True}
