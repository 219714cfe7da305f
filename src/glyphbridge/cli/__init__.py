"""Command-line interface for glyphbridge.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for glyph processing
- Verbose/quiet output modes
- Corner listing without writing output
- Detailed error reporting
"""

from glyphbridge.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
