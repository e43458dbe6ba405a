"""Command-line interface for hcontours.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- One summary line per threshold
- Verbose/quiet output modes
- Detailed error reporting
"""

from hcontours.cli.app import cli, main

__all__ = ["cli", "main"]
