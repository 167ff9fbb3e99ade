"""This module stores the model for the climate package."""

from .processor import Processor

__all__ = [
    "builders",
    "exceptions",
    "logger",
    "parser",
    "reader",
    "report",
    "schema",
    "Processor",
]
