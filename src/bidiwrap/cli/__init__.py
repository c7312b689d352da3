"""Command-line interface for bidiwrap.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Batch formatting of arguments or file lines
- Unicode or HTML output
- Visible rendering of directional controls
- Per-text inspection table
"""

from bidiwrap.cli.app import cli, main

__all__ = ["cli", "main"]
