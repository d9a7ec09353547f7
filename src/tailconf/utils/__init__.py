"""Utility functions and helpers."""

from .timing import timeit, section_timer
from .logging import setup_logging

__all__ = [
    "timeit",
    "section_timer",
    "setup_logging",
]
