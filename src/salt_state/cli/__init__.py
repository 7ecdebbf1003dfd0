"""Command-line entry point for the salt wrapper."""

from .app import app, main

__all__ = ["app", "main"]
