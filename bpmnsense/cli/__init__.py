"""Command-line interface for BPMNSense."""

from .main import cli, main

__all__ = ["cli", "main"]
