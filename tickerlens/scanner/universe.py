"""Universe scanner.

Scores every symbol of a universe independently and returns the actionable
ones (anything but HOLD), ranked by conviction score. Symbols are fetched in
parallel; a failure for one symbol is logged and never affects the others.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta
from typing import Iterable, Optional

from tickerlens.config import Settings
from tickerlens.models import ScanResult
from tickerlens.providers.base import BaseMarketData
from tickerlens.scoring.recommend import evaluate_closes

logger = logging.getLogger(__name__)


def scan_symbol(
    symbol: str,
    provider: BaseMarketData,
    settings: Optional[Settings] = None,
    as_of: Optional[date] = None,
) -> Optional[ScanResult]:
    """Score a single symbol for the scanner.

    Args:
        symbol: Trading symbol.
        provider: Market data source.
        settings: Indicator, scoring and scan settings.
        as_of: Last day of the history window (default today).

    Returns:
        ScanResult, or None if history is too short or the signal is HOLD.

    Raises:
        MarketDataError: If the provider cannot supply data.
    """
    settings = settings or Settings()
    symbol = symbol.upper()

    to_date = as_of or date.today()
    from_date = to_date - timedelta(days=settings.scan.lookback_days)

    quote = provider.get_quote(symbol)
    history = provider.get_historical(symbol, from_date, to_date)

    if len(history) < settings.scan.min_history:
        logger.debug(
            "Skipping %s: %d bars, need %d",
            symbol, len(history), settings.scan.min_history,
        )
        return None

    closes = [p.close for p in history]
    _, recommendation = evaluate_closes(
        quote.price, closes, settings.indicators, settings.scoring
    )

    if not recommendation.signal.is_actionable:
        return None

    return ScanResult(
        symbol=symbol,
        name=quote.name,
        price=quote.price,
        change_percent=quote.change_percent,
        recommendation=recommendation,
    )


def _scan_isolated(
    symbol: str,
    provider: BaseMarketData,
    settings: Settings,
    as_of: Optional[date],
) -> Optional[ScanResult]:
    try:
        return scan_symbol(symbol, provider, settings, as_of)
    except Exception as e:
        logger.warning("Error scanning %s: %s", symbol, e)
        return None


def scan_universe(
    provider: BaseMarketData,
    symbols: Optional[Iterable[str]] = None,
    settings: Optional[Settings] = None,
    max_workers: Optional[int] = None,
    as_of: Optional[date] = None,
) -> list[ScanResult]:
    """Scan a universe of symbols and rank actionable signals.

    Args:
        provider: Market data source.
        symbols: Symbols to scan (default: the configured universe).
        settings: Indicator, scoring and scan settings.
        max_workers: Parallel workers (default: ``settings.scan.max_workers``).
        as_of: Last day of the history window (default today).

    Returns:
        Non-HOLD results sorted by score, highest first. Ties keep scan order.
    """
    settings = settings or Settings()
    symbols = list(symbols) if symbols is not None else list(settings.scan.universe)
    workers = max_workers or settings.scan.max_workers

    if not symbols:
        return []

    logger.info("Scanning %d symbols with %d workers", len(symbols), workers)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_scan_isolated, symbol, provider, settings, as_of)
            for symbol in symbols
        ]
        # Collected in submission order so ties rank in scan order
        outcomes = [future.result() for future in futures]

    results = [r for r in outcomes if r is not None]
    results.sort(key=lambda r: r.recommendation.score, reverse=True)

    logger.info("Scan complete: %d actionable of %d symbols", len(results), len(symbols))
    return results
