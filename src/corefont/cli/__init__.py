"""Command-line interface for corefont.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Debug mode printing the generated module instead of writing it
- Font listing mode
- Verbose/quiet output modes
- Error reporting naming the failing file
"""

from corefont.cli.app import cli, main

__all__ = ["cli", "main"]
