"""Single-symbol analysis: quote and history in, full analysis out."""

import logging
from datetime import date, timedelta
from typing import Optional

from tickerlens.config import Settings
from tickerlens.exceptions import InsufficientDataError
from tickerlens.indicators.health import calculate_health_metrics
from tickerlens.models import SymbolAnalysis
from tickerlens.providers.base import BaseMarketData
from tickerlens.scoring.recommend import evaluate_closes

logger = logging.getLogger(__name__)


def analyze_symbol(
    symbol: str,
    provider: BaseMarketData,
    settings: Optional[Settings] = None,
    as_of: Optional[date] = None,
) -> SymbolAnalysis:
    """Analyze one symbol.

    Args:
        symbol: Trading symbol.
        provider: Market data source.
        settings: Indicator, scoring and lookback settings.
        as_of: Last day of the history window (default today).

    Returns:
        SymbolAnalysis with snapshot, recommendation and health scores.

    Raises:
        MarketDataError: If the provider cannot supply data.
        InsufficientDataError: If the provider returns no history.
    """
    settings = settings or Settings()
    symbol = symbol.upper()

    to_date = as_of or date.today()
    from_date = to_date - timedelta(days=settings.scan.lookback_days)

    quote = provider.get_quote(symbol)
    history = provider.get_historical(symbol, from_date, to_date)

    if not history:
        raise InsufficientDataError(
            f"No historical data for {symbol}; technical analysis is unavailable"
        )

    closes = [p.close for p in history]
    logger.debug("Analyzing %s with %d bars", symbol, len(closes))

    snapshot, recommendation = evaluate_closes(
        quote.price, closes, settings.indicators, settings.scoring
    )
    health = calculate_health_metrics(
        current_price=quote.price,
        history=closes,
        volume=quote.volume,
        market_cap=quote.market_cap,
        change_percent=quote.change_percent,
    )

    return SymbolAnalysis(
        symbol=symbol,
        quote=quote,
        snapshot=snapshot,
        recommendation=recommendation,
        health=health,
        data_points=len(closes),
    )
