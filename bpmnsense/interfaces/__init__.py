"""Interfaces the diagnostics bridge depends on."""

from .checker import Checker

__all__ = ["Checker"]
