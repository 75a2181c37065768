"""Autocomplete select widget backed by the fuzzy matcher."""

import time
from dataclasses import replace
from typing import Sequence

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Click
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option

from ...config import FuzzyConfig
from ...core import FilterMode, RankedEntry, filter_with_mode, highlight_text
from ..theme import MATCH_STYLE, Theme

# Options shown when the config has no limit
DEFAULT_LIMIT = 10


class FuzzySelect(Vertical):
    """An autocomplete widget that filters a list of labels as you type.

    Matched characters are highlighted in every option. Options with equal
    scores keep their original order, so the list does not jump around
    while typing.

    The dropdown is shown whenever the current query has matches. For a
    short time after a pick, focus and click events do not reopen it, since
    Textual delivers them right after the selection itself.
    """

    DEFAULT_CSS = f"""
    FuzzySelect {{
        height: auto;
        margin-bottom: 1;
    }}

    FuzzySelect .fuzzy-label {{
        margin-bottom: 0;
    }}

    FuzzySelect .fuzzy-count {{
        color: {Theme.MUTED};
        margin-top: 0;
    }}

    FuzzySelect OptionList {{
        max-height: 10;
        background: {Theme.SURFACE};
        layer: above;
        display: none;
    }}

    FuzzySelect OptionList.visible {{
        display: block;
        height: auto;
        border: solid {Theme.MUTED};
    }}

    FuzzySelect OptionList:focus {{
        border: solid {Theme.PRIMARY};
    }}
    """

    # Seconds after a pick during which the dropdown stays closed
    REOPEN_DELAY = 0.3

    value: reactive[str] = reactive("")

    class Changed(Message):
        """Message sent when the typed query changes."""

        def __init__(self, widget: "FuzzySelect", value: str) -> None:
            super().__init__()
            self.fuzzy_select = widget
            self.value = value

    class Selected(Message):
        """Message sent when an item is picked from the list."""

        def __init__(self, widget: "FuzzySelect", value: str) -> None:
            super().__init__()
            self.fuzzy_select = widget
            self.value = value

    def __init__(
        self,
        items: Sequence[str] = (),
        label: str = "Search",
        placeholder: str = "Start typing to filter...",
        config: FuzzyConfig | None = None,
        input_id: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.label = label
        self.placeholder = placeholder
        self.config = config or FuzzyConfig()
        self.input_id = input_id or f"fuzzy-input-{id(self)}"
        self._items: list[str] = list(items)
        self._matches: list[RankedEntry[int]] = []
        self._picked_at: float | None = None

    def compose(self) -> ComposeResult:
        yield Static(self.label, classes="fuzzy-label")
        yield Input(placeholder=self.placeholder, id=self.input_id)
        yield OptionList(id="fuzzy-options")
        yield Static("", id="match-count", classes="fuzzy-count")

    def on_mount(self) -> None:
        self._update_options("")

    @property
    def items(self) -> list[str]:
        return list(self._items)

    @property
    def matches(self) -> list[str]:
        """Labels currently listed, best match first."""
        return [self._items[entry.candidate] for entry in self._matches]

    def set_items(self, items: Sequence[str]) -> None:
        """Replace the item list and re-filter with the current query."""
        self._items = list(items)
        self._update_options(self.value)

    def set_filter_mode(self, mode: FilterMode) -> None:
        """Switch how typed text filters the list.

        The widget keeps its own copy of the config, so the caller's
        FuzzyConfig is left as it was.
        """
        self.config = replace(self.config, filter_mode=mode)
        self._update_options(self.value)

    def _filter(self, filter_text: str) -> list[RankedEntry[int]]:
        """Rank item indices against the typed text."""
        limit = self.config.limit or DEFAULT_LIMIT
        matcher = self.config.make_matcher(filter_text)
        if matcher.is_empty():
            return filter_with_mode(
                FilterMode.NONE, "", range(len(self._items)), key=self._items.__getitem__, limit=limit
            )
        return filter_with_mode(
            self.config.filter_mode,
            filter_text,
            range(len(self._items)),
            key=self._items.__getitem__,
            limit=limit,
            matcher=matcher,
        )

    def _recently_picked(self) -> bool:
        if self._picked_at is None:
            return False
        return time.monotonic() - self._picked_at < self.REOPEN_DELAY

    def _set_dropdown(self, visible: bool) -> None:
        """Show or hide the option list. Showing is skipped right after a pick."""
        try:
            option_list = self.query_one("#fuzzy-options", OptionList)
        except NoMatches:
            return

        if not visible:
            option_list.remove_class("visible")
            option_list.highlighted = None
        elif not self._recently_picked():
            option_list.add_class("visible")

    def _update_options(self, filter_text: str, show_all: bool = False) -> None:
        """Refill the option list from the items matching filter_text.

        Args:
            filter_text: Text to filter items by
            show_all: If True, list the first items when filter is empty
        """
        try:
            option_list = self.query_one("#fuzzy-options", OptionList)
            count = self.query_one("#match-count", Static)
        except NoMatches:
            return

        if filter_text or show_all:
            self._matches = self._filter(filter_text)
        else:
            self._matches = []

        option_list.clear_options()
        for entry in self._matches:
            label = self._items[entry.candidate]
            prompt = highlight_text(label, entry.result, MATCH_STYLE)
            option_list.add_option(Option(prompt, id=str(entry.candidate)))

        if filter_text:
            count.update(f"{len(self._matches)} of {len(self._items)}")
        else:
            count.update("")

        self._set_dropdown(bool(self._matches))

    def refresh_from_input(self) -> None:
        """Re-filter with whatever the input holds, listing everything when it is empty."""
        try:
            text = self.query_one(f"#{self.input_id}", Input).value
        except NoMatches:
            return
        self._update_options(text, show_all=not text)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter options and emit a change message."""
        event.stop()
        self.value = event.value
        self._update_options(event.value)
        self.post_message(self.Changed(self, event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key - select the best match, if any."""
        event.stop()
        if self._matches:
            self._select_index(self._matches[0].candidate)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Handle option selection from the list."""
        event.stop()
        self._select_index(int(event.option_id))

    def _select_index(self, index: int) -> None:
        """Put the item at index into the input and announce the pick."""
        item = self._items[index]
        self._picked_at = time.monotonic()

        input_widget = self.query_one(f"#{self.input_id}", Input)
        input_widget.value = item
        self._set_dropdown(False)
        input_widget.focus()

        self.value = item
        self.post_message(self.Selected(self, item))

    def _focus_input(self) -> None:
        if self._recently_picked():
            return
        try:
            self.query_one(f"#{self.input_id}", Input).focus()
        except NoMatches:
            return
        self.refresh_from_input()

    def on_focus(self) -> None:
        """When the widget gets focus, hand it to the input and show options."""
        self._focus_input()

    def on_click(self, event: Click) -> None:
        """Handle clicks on the widget to show options."""
        self._focus_input()

    def on_blur(self) -> None:
        """Hide options shortly after focus leaves both the input and the list."""
        if self._recently_picked():
            return

        def hide_if_unfocused() -> None:
            if self._recently_picked():
                return
            try:
                input_focused = self.query_one(f"#{self.input_id}", Input).has_focus
                options_focused = self.query_one("#fuzzy-options", OptionList).has_focus
            except NoMatches:
                return
            if not input_focused and not options_focused:
                self._set_dropdown(False)

        self.set_timer(0.2, hide_if_unfocused)

    def clear(self) -> None:
        """Clear the typed text and hide the options."""
        try:
            self.query_one(f"#{self.input_id}", Input).value = ""
        except NoMatches:
            pass
        self.value = ""
        self._update_options("")
