"""Helpers shared by CLI commands."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from tickerlens.config import Settings, load_settings
from tickerlens.exceptions import ConfigError
from tickerlens.models import Signal
from tickerlens.providers import JsonFileMarketData

SIGNAL_COLORS = {
    Signal.STRONG_BUY: "bold green",
    Signal.BUY: "green",
    Signal.HOLD: "yellow",
    Signal.SELL: "red",
    Signal.STRONG_SELL: "bold red",
}


def print_error(console: Console, title: str, message: str) -> None:
    console.print(Panel(
        message,
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def get_settings(ctx: click.Context, console: Console) -> Settings:
    """Load settings for the config path given to the CLI group."""
    config_path = (ctx.obj or {}).get("config_path")
    try:
        return load_settings(config_path)
    except ConfigError as e:
        print_error(console, "Configuration Error", f"[red]{e}[/red]")
        raise SystemExit(1)


def get_provider(
    data_dir: Optional[Path],
    settings: Settings,
    console: Console,
) -> JsonFileMarketData:
    """Build the JSON file provider from the option or the config file."""
    directory = data_dir or settings.scan.data_dir

    if directory is None:
        print_error(
            console,
            "No Market Data",
            "[red]No data directory configured.[/red]\n\n"
            "Pass [cyan]--data-dir DIR[/cyan] or set [cyan]data_dir[/cyan] "
            "in the [cyan]\\[scan][/cyan] section of the config file.",
        )
        raise SystemExit(1)

    return JsonFileMarketData(Path(directory).expanduser())


def format_optional(value: Optional[float], fmt: str = "{:.2f}") -> str:
    return fmt.format(value) if value is not None else "N/A"
