"""Current quote data model."""

from pydantic import BaseModel, Field, model_validator


class Quote(BaseModel):
    """Represents a current quote for a symbol."""

    symbol: str = Field(..., min_length=1, description="Trading symbol")
    name: str = Field(default="", description="Short display name")
    price: float = Field(..., ge=0, description="Last traded price")
    change: float = Field(default=0.0, description="Price change from previous close")
    change_percent: float = Field(default=0.0, description="Percentage change")
    volume: int = Field(default=0, ge=0, description="Trading volume")
    market_cap: float = Field(default=0.0, ge=0, description="Market capitalization")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data):
        if isinstance(data, dict) and not data.get("name") and data.get("symbol"):
            data = {**data, "name": data["symbol"]}
        return data
