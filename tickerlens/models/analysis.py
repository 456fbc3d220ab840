"""Analysis and scan result models."""

from pydantic import BaseModel, Field

from tickerlens.models.indicator import IndicatorSnapshot
from tickerlens.models.recommendation import Recommendation
from tickerlens.models.quote import Quote


class ScanResult(BaseModel):
    """An actionable symbol found by the universe scanner."""

    symbol: str = Field(..., min_length=1, description="Trading symbol")
    name: str = Field(..., description="Display name")
    price: float = Field(..., ge=0, description="Current price")
    change_percent: float = Field(..., description="Percentage change on the day")
    recommendation: Recommendation

    model_config = {"frozen": True}


class HealthMetrics(BaseModel):
    """Heuristic health scores, each in the range 0-100."""

    liquidity: float = Field(..., ge=0, le=100, description="Higher is more liquid")
    drawdown_exposure: float = Field(
        ..., ge=0, le=100, description="Higher means closer to the period high"
    )
    concentration: float = Field(
        ..., ge=0, le=100, description="Higher means less concentration risk"
    )
    diversification: float = Field(
        ..., ge=0, le=100, description="Higher means better diversification impact"
    )

    model_config = {"frozen": True}


class SymbolAnalysis(BaseModel):
    """Full single-symbol analysis."""

    symbol: str = Field(..., min_length=1, description="Trading symbol")
    quote: Quote
    snapshot: IndicatorSnapshot
    recommendation: Recommendation
    health: HealthMetrics
    data_points: int = Field(..., ge=0, description="Number of bars analyzed")

    model_config = {"frozen": True}
