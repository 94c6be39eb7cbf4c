"""Command-line interface for strokeport.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG export with background, pattern and print optimization switches
- Clipboard margin preset
- Content summary (strokes, bounds, size)
- Detailed error reporting
"""

from strokeport.cli.app import cli, main

__all__ = ["cli", "main"]
