"""Scan command for tickerlens CLI.

Scores a universe of symbols and lists the actionable signals.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tickerlens.cli.common import SIGNAL_COLORS, get_provider, get_settings
from tickerlens.models import ScanResult
from tickerlens.scanner.universe import scan_universe

console = Console()


def render_results(results: list[ScanResult]) -> None:
    """Print ranked scan results as a table."""
    bullish = sum(1 for r in results if r.recommendation.signal.is_bullish)
    bearish = sum(1 for r in results if r.recommendation.signal.is_bearish)

    table = Table(
        title=f"Scan Results ({len(results)} signals)",
        caption=f"[green]{bullish} bullish[/green] / [red]{bearish} bearish[/red]",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("Symbol", style="bold")
    table.add_column("Name")
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right")
    table.add_column("Signal")
    table.add_column("Score", justify="right")
    table.add_column("Reason", style="dim")

    for rank, result in enumerate(results, start=1):
        rec = result.recommendation
        color = SIGNAL_COLORS[rec.signal]
        change_style = "green" if result.change_percent >= 0 else "red"

        table.add_row(
            str(rank),
            result.symbol,
            result.name,
            f"${result.price:.2f}",
            f"[{change_style}]{result.change_percent:+.2f}%[/{change_style}]",
            f"[{color}]{rec.signal.label}[/{color}]",
            str(rec.score),
            rec.reason,
        )

    console.print(table)


@click.command()
@click.argument("symbols", nargs=-1)
@click.option(
    "-d", "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory of <SYMBOL>.json market data files",
)
@click.option(
    "-w", "--workers",
    type=click.IntRange(min=1),
    help="Number of symbols scanned in parallel",
)
@click.pass_context
def scan(
    ctx: click.Context,
    symbols: tuple[str, ...],
    data_dir: Optional[Path],
    workers: Optional[int],
) -> None:
    """Scan symbols and rank BUY/SELL signals by conviction.

    Scans the configured universe when no symbols are given.

    \b
    Examples:
      tickerlens scan --data-dir ./data             # Default universe
      tickerlens scan AAPL MSFT NVDA -d ./data      # Specific symbols
      tickerlens scan -d ./data --workers 8
    """
    settings = get_settings(ctx, console)
    provider = get_provider(data_dir, settings, console)

    universe = [s.upper() for s in symbols] or list(settings.scan.universe)
    console.print(f"[dim]Scanning {len(universe)} symbols...[/dim]")

    results = scan_universe(
        provider,
        symbols=universe,
        settings=settings,
        max_workers=workers,
    )

    if not results:
        console.print(Panel(
            "[dim]No actionable signals found.[/dim]\n\n"
            "Every symbol was HOLD, had too little history,\n"
            "or could not be loaded (run with --verbose for details).",
            title="[bold]No Results[/bold]",
            border_style="dim",
        ))
        return

    render_results(results)
