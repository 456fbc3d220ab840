"""The `tickerlens` command group: global options, logging setup and
the analyze/scan sub-commands."""

import importlib
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler


class LazyGroup(click.Group):
    """Click group whose sub-commands live in separate modules.

    ``analyze`` and ``scan`` pull in the indicator, scoring and provider
    packages. Each module is imported the first time its command is
    resolved, so ``tickerlens --help`` stays cheap.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """
        Args:
            lazy_subcommands: Command name to the dotted path of the module
                defining a click command with that name.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(set(super().list_commands(ctx)) | set(self._lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is None and cmd_name in self._lazy_subcommands:
            command = self._import_command(cmd_name)
        return command

    def _import_command(self, cmd_name: str) -> click.Command:
        """Import the command's module and register the command on the group."""
        module_path = self._lazy_subcommands[cmd_name]
        command = getattr(importlib.import_module(module_path), cmd_name, None)
        if not isinstance(command, click.Command):
            raise click.ClickException(f"{module_path} defines no '{cmd_name}' command")

        self.add_command(command)
        return command


LAZY_SUBCOMMANDS = {
    "analyze": "tickerlens.cli.analyze",
    "scan": "tickerlens.cli.scan",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tickerlens")
@click.option(
    "-c", "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: ~/.config/tickerlens/config.toml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """tickerlens - technical signals and universe scans for daily stock data.

    \b
    Quick Start:
      tickerlens analyze AAPL --data-dir ./data   # Score one symbol
      tickerlens scan --data-dir ./data           # Rank the default universe
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
