"""Custom TUI widgets."""

from .fuzzy_select import FuzzySelect

__all__ = [
    "FuzzySelect",
]
