"""Command-line interface for plottext.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Plot literal text, stdin, or a rendered message template
- Named plotter profiles with per-option overrides
- G-code to a file or stdout
- Detailed error reporting per pipeline stage
"""

from plottext.cli.app import cli, main

__all__ = ["cli", "main"]
