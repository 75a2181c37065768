"""Textual widgets and demo app built on the fuzzy matcher."""

from .app import FuzzyCommandProvider, FuzzyDemoApp, PaletteCommand
from .widgets import FuzzySelect

__all__ = [
    "FuzzyCommandProvider",
    "FuzzyDemoApp",
    "PaletteCommand",
    "FuzzySelect",
]
