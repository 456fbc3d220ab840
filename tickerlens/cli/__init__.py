"""CLI commands for tickerlens.

This package provides the command-line interface for single-symbol
analysis and universe scanning.
"""

from tickerlens.cli.main import cli, main

__all__ = ["cli", "main"]
