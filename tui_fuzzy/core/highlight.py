"""Turn match indices into highlighted text for list rendering."""

from typing import Iterable

from rich.text import Text

from .result import MatchResult

# Widgets pass their own theme style
DEFAULT_HIGHLIGHT_STYLE = "bold"


def highlight_chars(target: str, indices: Iterable[int]) -> list[tuple[str, bool]]:
    """Pair every character of target with whether it was matched."""
    matched = set(indices)
    return [(ch, i in matched) for i, ch in enumerate(target)]


def highlight_spans(indices: Iterable[int]) -> list[tuple[int, int]]:
    """Collapse sorted indices into half-open (start, end) runs.

    Example:
        >>> highlight_spans([0, 1, 2, 7, 9, 10])
        [(0, 3), (7, 8), (9, 11)]
    """
    spans: list[tuple[int, int]] = []
    for i in indices:
        if spans and spans[-1][1] == i:
            spans[-1] = (spans[-1][0], i + 1)
        else:
            spans.append((i, i + 1))
    return spans


def highlight_text(
    target: str,
    result: MatchResult | None,
    style: str = DEFAULT_HIGHLIGHT_STYLE,
) -> Text:
    """Build a rich Text with matched characters styled.

    Args:
        target: The label that was matched.
        result: Match result for target, or None for plain text.
        style: Rich style applied to matched runs.
    """
    text = Text(target)
    if result is None:
        return text

    valid = [i for i in result.indices if 0 <= i < len(target)]
    for start, end in highlight_spans(valid):
        text.stylize(style, start, end)
    return text
