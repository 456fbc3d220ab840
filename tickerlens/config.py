"""Configuration for indicator periods, scoring heuristics and scanning.

Settings are read from ``~/.config/tickerlens/config.toml``. Every section is
optional; missing keys fall back to the defaults below.

Example::

    [indicators]
    sma_period = 50
    rsi_period = 14

    [scoring]
    buy_threshold = 60

    [scan]
    max_workers = 8
    universe = ["AAPL", "MSFT"]
"""

from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError, model_validator

from tickerlens.exceptions import ConfigError


DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tickerlens" / "config.toml"

# Symbols scanned when no explicit list is given
DEFAULT_UNIVERSE = [
    "AAPL", "MSFT", "NVDA", "TSLA", "AMD", "SPY", "QQQ",
    "GOOGL", "AMZN", "META", "NFLX", "BRK-B", "V", "JPM",
]


class IndicatorConfig(BaseModel):
    """Lookback periods used when computing indicators for scoring."""

    sma_period: int = Field(default=50, ge=1, description="Trend moving average period")
    rsi_period: int = Field(default=14, ge=1, description="RSI period")
    rsi_epsilon: float = Field(
        default=0.00001, gt=0, description="Stand-in for a zero average loss"
    )
    macd_fast: int = Field(default=12, ge=1, description="MACD fast EMA period")
    macd_slow: int = Field(default=26, ge=1, description="MACD slow EMA period")
    macd_signal: int = Field(default=9, ge=1, description="MACD signal EMA period")
    bollinger_period: int = Field(default=20, ge=1, description="Bollinger SMA period")
    bollinger_std_dev: float = Field(
        default=2.0, gt=0, description="Bollinger standard deviation multiplier"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_macd_periods(self) -> "IndicatorConfig":
        if self.macd_fast >= self.macd_slow:
            raise ValueError("macd_fast must be shorter than macd_slow")
        return self


class ScoringConfig(BaseModel):
    """Base score, rule deltas, thresholds and reason texts of the scorer."""

    base_score: int = Field(default=50, description="Neutral starting score")

    trend_delta: int = Field(default=10, description="Price vs trend SMA adjustment")

    rsi_oversold: float = Field(default=30.0, description="RSI below this is oversold")
    rsi_overbought: float = Field(default=70.0, description="RSI above this is overbought")
    rsi_lean_bullish: float = Field(default=45.0, description="RSI below this leans bullish")
    rsi_lean_bearish: float = Field(default=55.0, description="RSI above this leans bearish")
    rsi_extreme_delta: int = Field(default=20, description="Oversold/overbought adjustment")
    rsi_lean_delta: int = Field(default=5, description="Mild RSI lean adjustment")

    macd_cross_delta: int = Field(default=15, description="Histogram zero-cross adjustment")
    macd_momentum_delta: int = Field(default=5, description="Histogram sign adjustment")

    bollinger_delta: int = Field(default=15, description="Band touch adjustment")

    min_score: int = Field(default=0, ge=0, le=100, description="Lowest possible score")
    max_score: int = Field(default=100, ge=0, le=100, description="Highest possible score")

    strong_buy_threshold: int = Field(default=80, description="Score >= this is STRONG_BUY")
    buy_threshold: int = Field(default=60, description="Score >= this is BUY")
    sell_threshold: int = Field(default=40, description="Score <= this is SELL")
    strong_sell_threshold: int = Field(default=20, description="Score <= this is STRONG_SELL")

    reason_bullish_trend: str = "Price is above 50-day moving average (Bullish Trend)"
    reason_bearish_trend: str = "Price is below 50-day moving average (Bearish Trend)"
    reason_oversold: str = "RSI indicates oversold conditions (Buy Signal)"
    reason_overbought: str = "RSI indicates overbought conditions (Sell Signal)"
    reason_bullish_crossover: str = "MACD bullish crossover detected"
    reason_bearish_crossover: str = "MACD bearish crossover detected"
    reason_lower_band: str = "Price touched lower Bollinger Band (Potential Rebound)"
    reason_upper_band: str = "Price touched upper Bollinger Band (Potential Pullback)"
    reason_mixed: str = "Market shows mixed signals."

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_thresholds(self) -> "ScoringConfig":
        ordered = [
            self.min_score,
            self.strong_sell_threshold,
            self.sell_threshold,
            self.buy_threshold,
            self.strong_buy_threshold,
            self.max_score,
        ]
        if ordered != sorted(ordered):
            raise ValueError(
                "score thresholds must satisfy min <= strong_sell <= sell "
                "<= buy <= strong_buy <= max"
            )
        return self


class ScanConfig(BaseModel):
    """Universe scanner settings."""

    universe: list[str] = Field(
        default_factory=lambda: list(DEFAULT_UNIVERSE),
        description="Symbols scanned when none are given",
    )
    lookback_days: int = Field(
        default=100, ge=1, description="Calendar days of history requested per symbol"
    )
    min_history: int = Field(
        default=51, ge=1, description="Symbols with fewer bars are skipped"
    )
    max_workers: int = Field(default=4, ge=1, description="Parallel symbol workers")
    data_dir: Optional[Path] = Field(
        default=None, description="Directory of JSON market data files"
    )

    model_config = {"frozen": True}


class Settings(BaseModel):
    """All tickerlens settings."""

    indicators: IndicatorConfig = Field(default_factory=IndicatorConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)

    model_config = {"frozen": True}


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Config file path. Defaults to ``DEFAULT_CONFIG_PATH``.

    Returns:
        Parsed settings, or defaults when the file does not exist.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return Settings()

    try:
        raw = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
