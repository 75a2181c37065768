"""Monokai Pro theme colors shared by the fuzzy widgets."""


class Theme:
    """Color constants for the Monokai theme."""

    # Base colors
    SURFACE = "#141a26"
    MUTED = "#555c65"

    # Accent colors
    YELLOW = "#F2C063"
    CYAN = "#78DCE8"

    # Semantic aliases
    PRIMARY = CYAN
    MATCH = YELLOW


# Rich style for matched characters in option labels
MATCH_STYLE = f"bold {Theme.MATCH}"
