"""Command-line interface for carddeck."""

from .main import app, main

__all__ = ["app", "main"]
