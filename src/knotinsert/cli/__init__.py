"""Command-line interface for knotinsert.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Create, inspect and edit JSON path documents
- Split and delete knots by progress along the path
- SVG export of the editor view
- Detailed error reporting
"""

from knotinsert.cli.app import cli, main

__all__ = ["cli", "main"]
