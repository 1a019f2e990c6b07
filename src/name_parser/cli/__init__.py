"""
CLI package for name_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from name_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
