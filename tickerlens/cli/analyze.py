"""Analyze command for tickerlens CLI.

Scores a single symbol and shows its indicators and health metrics.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tickerlens.cli.common import (
    SIGNAL_COLORS,
    format_optional,
    get_provider,
    get_settings,
    print_error,
)
from tickerlens.exceptions import TickerlensError
from tickerlens.models import IndicatorSnapshot, SymbolAnalysis
from tickerlens.scoring.analysis import analyze_symbol

console = Console()


def _interpret_rsi(value: Optional[float]) -> tuple[str, str]:
    """Interpret RSI value and return signal and color."""
    if value is None:
        return "Insufficient data", "dim"
    if value < 30:
        return "Oversold", "green"
    elif value > 70:
        return "Overbought", "red"
    elif value < 45:
        return "Leaning Bullish", "yellow"
    elif value > 55:
        return "Leaning Bearish", "yellow"
    return "Neutral", "dim"


def _interpret_histogram(hist: Optional[float], prev: Optional[float]) -> tuple[str, str]:
    """Interpret the last two MACD histogram values."""
    if hist is None or prev is None:
        return "Insufficient data", "dim"
    if hist > 0 and prev <= 0:
        return "Bullish Crossover", "green"
    elif hist < 0 and prev >= 0:
        return "Bearish Crossover", "red"
    elif hist > 0:
        return "Bullish Momentum", "green"
    return "Bearish Momentum", "red"


def _interpret_bands(snapshot: IndicatorSnapshot) -> tuple[str, str]:
    """Interpret price position relative to the Bollinger Bands."""
    if snapshot.upper is None or snapshot.lower is None:
        return "Insufficient data", "dim"
    if snapshot.price <= snapshot.lower:
        return "At Lower Band", "green"
    elif snapshot.price >= snapshot.upper:
        return "At Upper Band", "red"
    return "Inside Bands", "dim"


def _indicator_table(snapshot: IndicatorSnapshot) -> Table:
    table = Table(title="Indicators", show_header=True, header_style="bold cyan")
    table.add_column("Indicator", style="bold")
    table.add_column("Value", justify="right")
    table.add_column("Signal")

    if snapshot.sma is None:
        trend, trend_style = "Insufficient data", "dim"
    elif snapshot.price > snapshot.sma:
        trend, trend_style = "Above SMA (Bullish)", "green"
    else:
        trend, trend_style = "Below SMA (Bearish)", "red"
    table.add_row("SMA", format_optional(snapshot.sma), f"[{trend_style}]{trend}[/{trend_style}]")

    text, style = _interpret_rsi(snapshot.rsi)
    table.add_row("RSI", format_optional(snapshot.rsi, "{:.1f}"), f"[{style}]{text}[/{style}]")

    text, style = _interpret_histogram(snapshot.histogram, snapshot.previous_histogram)
    macd_value = (
        f"{format_optional(snapshot.macd, '{:.3f}')} / "
        f"{format_optional(snapshot.macd_signal, '{:.3f}')} / "
        f"{format_optional(snapshot.histogram, '{:+.3f}')}"
    )
    table.add_row("MACD / Signal / Hist", macd_value, f"[{style}]{text}[/{style}]")

    text, style = _interpret_bands(snapshot)
    bands_value = (
        f"{format_optional(snapshot.lower)} - "
        f"{format_optional(snapshot.middle)} - "
        f"{format_optional(snapshot.upper)}"
    )
    table.add_row("Bollinger (L-M-U)", bands_value, f"[{style}]{text}[/{style}]")

    return table


def _health_table(analysis: SymbolAnalysis) -> Table:
    table = Table(title="Health", show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="bold")
    table.add_column("Score", justify="right")

    health = analysis.health
    for label, value in (
        ("Liquidity", health.liquidity),
        ("Drawdown Exposure", health.drawdown_exposure),
        ("Concentration", health.concentration),
        ("Diversification", health.diversification),
    ):
        style = "green" if value >= 70 else "yellow" if value >= 40 else "red"
        table.add_row(label, f"[{style}]{value:.0f}[/{style}]")

    return table


def render_analysis(analysis: SymbolAnalysis) -> None:
    """Print a full single-symbol analysis."""
    quote = analysis.quote
    rec = analysis.recommendation
    color = SIGNAL_COLORS[rec.signal]
    change_style = "green" if quote.change >= 0 else "red"

    console.print(Panel(
        f"[{color}]{rec.signal.label}[/{color}]  "
        f"Conviction: [bold]{rec.score}%[/bold]\n\n"
        f"{rec.reason}\n\n"
        f"Price: [bold]${quote.price:.2f}[/bold]  "
        f"[{change_style}]{quote.change:+.2f} ({quote.change_percent:+.2f}%)[/{change_style}]  "
        f"[dim]{analysis.data_points} bars[/dim]",
        title=f"[bold]{analysis.symbol}[/bold] - {quote.name}",
        border_style=color.split()[-1],
    ))
    console.print(_indicator_table(analysis.snapshot))
    console.print(_health_table(analysis))


@click.command()
@click.argument("symbol")
@click.option(
    "-d", "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory of <SYMBOL>.json market data files",
)
@click.pass_context
def analyze(ctx: click.Context, symbol: str, data_dir: Optional[Path]) -> None:
    """Score a symbol and show its technical indicators.

    \b
    Examples:
      tickerlens analyze AAPL --data-dir ./data
    """
    settings = get_settings(ctx, console)
    provider = get_provider(data_dir, settings, console)

    try:
        analysis = analyze_symbol(symbol, provider, settings)
    except TickerlensError as e:
        print_error(console, "Analysis Failed", f"[red]{e}[/red]")
        raise SystemExit(1)

    render_analysis(analysis)
