"""Recommendation scoring from the latest indicator values.

The score starts neutral and is adjusted by four rules, always applied in
the same order: trend, RSI momentum, MACD histogram and Bollinger extremes.
Each rule may record a reason. Only the most recently recorded reason is
reported, so a later rule's reason replaces an earlier one.
"""

from typing import Optional, Sequence

from tickerlens.config import IndicatorConfig, ScoringConfig
from tickerlens.indicators.bands import calculate_bollinger_bands
from tickerlens.indicators.oscillators import calculate_macd, calculate_rsi
from tickerlens.indicators.series import calculate_sma, latest
from tickerlens.models import (
    BollingerResult,
    IndicatorSnapshot,
    MACDResult,
    Recommendation,
    Signal,
)


def score_to_signal(score: int, config: Optional[ScoringConfig] = None) -> Signal:
    """Map a clamped score to its signal class.

    Args:
        score: Conviction score.
        config: Scoring thresholds (defaults apply when None).

    Returns:
        The signal class. Scores strictly between the sell and buy
        thresholds are HOLD.
    """
    config = config or ScoringConfig()

    if score >= config.strong_buy_threshold:
        return Signal.STRONG_BUY
    if score >= config.buy_threshold:
        return Signal.BUY
    if score <= config.strong_sell_threshold:
        return Signal.STRONG_SELL
    if score <= config.sell_threshold:
        return Signal.SELL
    return Signal.HOLD


def score_snapshot(
    snapshot: IndicatorSnapshot,
    config: Optional[ScoringConfig] = None,
) -> Recommendation:
    """Score a precomputed indicator snapshot.

    Args:
        snapshot: Latest indicator values and the current price.
        config: Scoring heuristics (defaults apply when None).

    Returns:
        Recommendation with signal, clamped score and primary reason.
    """
    config = config or ScoringConfig()
    score = config.base_score
    reasons: list[str] = []
    price = snapshot.price

    # Trend (price vs SMA); an undefined SMA is not a bullish trend
    if snapshot.sma is not None and price > snapshot.sma:
        score += config.trend_delta
        reasons.append(config.reason_bullish_trend)
    else:
        score -= config.trend_delta
        reasons.append(config.reason_bearish_trend)

    # RSI momentum
    rsi = snapshot.rsi
    if rsi is not None:
        if rsi < config.rsi_oversold:
            score += config.rsi_extreme_delta
            reasons.append(config.reason_oversold)
        elif rsi > config.rsi_overbought:
            score -= config.rsi_extreme_delta
            reasons.append(config.reason_overbought)
        elif rsi < config.rsi_lean_bullish:
            score += config.rsi_lean_delta
        elif rsi > config.rsi_lean_bearish:
            score -= config.rsi_lean_delta

    # MACD histogram crossover
    hist = snapshot.histogram
    prev_hist = snapshot.previous_histogram
    if hist is not None and prev_hist is not None:
        if hist > 0 and prev_hist <= 0:
            score += config.macd_cross_delta
            reasons.append(config.reason_bullish_crossover)
        elif hist < 0 and prev_hist >= 0:
            score -= config.macd_cross_delta
            reasons.append(config.reason_bearish_crossover)
        elif hist > 0:
            score += config.macd_momentum_delta
        else:
            score -= config.macd_momentum_delta

    # Bollinger band extremes
    if snapshot.upper is not None and snapshot.lower is not None:
        if price <= snapshot.lower:
            score += config.bollinger_delta
            reasons.append(config.reason_lower_band)
        elif price >= snapshot.upper:
            score -= config.bollinger_delta
            reasons.append(config.reason_upper_band)

    score = max(config.min_score, min(config.max_score, score))

    return Recommendation(
        signal=score_to_signal(score, config),
        score=score,
        reason=reasons[-1] if reasons else config.reason_mixed,
    )


def _latest_snapshot(
    price: float,
    sma: Optional[float],
    rsi: Optional[float],
    macd: MACDResult,
    bollinger: BollingerResult,
) -> IndicatorSnapshot:
    return IndicatorSnapshot(
        price=price,
        sma=sma,
        rsi=rsi,
        macd=latest(macd.macd_line),
        macd_signal=latest(macd.signal_line),
        histogram=latest(macd.histogram),
        previous_histogram=latest(macd.histogram, back=1),
        upper=latest(bollinger.upper),
        middle=latest(bollinger.middle),
        lower=latest(bollinger.lower),
    )


def generate_recommendation(
    price: float,
    sma50: Optional[float],
    rsi: Optional[float],
    macd: MACDResult,
    bollinger: BollingerResult,
    config: Optional[ScoringConfig] = None,
) -> Recommendation:
    """Score the latest indicator values into a recommendation.

    Args:
        price: Current price.
        sma50: Latest trend SMA value. None (too little history) scores
            as a bearish trend.
        rsi: Latest RSI value, or None if undefined.
        macd: Full MACD result; the last two histogram values are used.
        bollinger: Full Bollinger result; the last band values are used.
        config: Scoring heuristics (defaults apply when None).

    Returns:
        Recommendation with signal, clamped score and primary reason.
    """
    return score_snapshot(_latest_snapshot(price, sma50, rsi, macd, bollinger), config)


def build_snapshot(
    price: float,
    closes: Sequence[float],
    config: Optional[IndicatorConfig] = None,
) -> IndicatorSnapshot:
    """Compute every scored indicator from closes and take the latest values.

    Args:
        price: Current price.
        closes: Close prices, oldest first.
        config: Indicator periods (defaults apply when None).

    Returns:
        IndicatorSnapshot; fields are None where history is too short.
    """
    config = config or IndicatorConfig()

    sma = calculate_sma(closes, config.sma_period)
    rsi = calculate_rsi(closes, config.rsi_period, epsilon=config.rsi_epsilon)
    macd = calculate_macd(closes, config.macd_fast, config.macd_slow, config.macd_signal)
    bollinger = calculate_bollinger_bands(
        closes, config.bollinger_period, config.bollinger_std_dev
    )

    return _latest_snapshot(price, latest(sma), latest(rsi), macd, bollinger)


def evaluate_closes(
    price: float,
    closes: Sequence[float],
    indicator_config: Optional[IndicatorConfig] = None,
    scoring_config: Optional[ScoringConfig] = None,
) -> tuple[IndicatorSnapshot, Recommendation]:
    """Run the full indicator and scoring pipeline on a close series.

    Returns:
        Tuple of (snapshot, recommendation).
    """
    snapshot = build_snapshot(price, closes, indicator_config)
    return snapshot, score_snapshot(snapshot, scoring_config)
