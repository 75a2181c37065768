"""Demo Textual application for the fuzzy matcher.

Launch with:
    python -m tui_fuzzy
    # or after installing:
    tui-fuzzy
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.command import Hit, Hits, Provider
from textual.widgets import Footer, Header, Input, Static

from ..config import FuzzyConfig
from ..core import FilterMode, FuzzyMatcher, highlight_text, match_first
from .theme import MATCH_STYLE
from .widgets import FuzzySelect

# Items listed when the app is started without an item file
DEMO_ITEMS = [
    "CommandPalette",
    "ComboBox",
    "Autocomplete",
    "MultiSelect",
    "Select",
    "TreeSearch",
    "fuzzy finder",
    "file_browser.py",
    "apple",
    "application",
    "banana",
    "appetite",
    "src/widget/command_palette.rs",
    "src/utils/fuzzy.rs",
    "README.md",
]


@dataclass(frozen=True)
class PaletteCommand:
    """An entry in the command palette.

    Matching tries the name first, then the description, then the category.
    """

    name: str
    description: str
    action: str
    category: Optional[str] = None

    def fields(self) -> tuple[str, str, Optional[str]]:
        return self.name, self.description, self.category


COMMANDS = [
    *(
        PaletteCommand(
            f"Filter mode: {mode.value}",
            f"Filter the list using {mode.value} matching",
            f"set_filter_mode('{mode.value}')",
            category="filter",
        )
        for mode in FilterMode
    ),
    PaletteCommand("Clear search", "Empty the search box", "clear_search", category="edit"),
    PaletteCommand("Quit", "Exit the demo", "quit", category="app"),
]


def command_display(command: PaletteCommand, field_index: int, result) -> Text:
    """Render a command name, highlighted only when the name matched."""
    if field_index == 0:
        return highlight_text(command.name, result, MATCH_STYLE)
    return Text(command.name)


class FuzzyCommandProvider(Provider):
    """Command palette provider ranked by the fuzzy matcher."""

    def _make_command(self, action: str):
        """Create an async command callback."""

        async def run_command() -> None:
            await self.app.run_action(action)

        return run_command

    async def search(self, query: str) -> Hits:
        """Search commands matching the query."""
        matcher = FuzzyMatcher(query)

        for command in COMMANDS:
            hit = match_first(matcher, command.fields())
            if hit is None:
                continue
            field_index, result = hit
            yield Hit(
                result.score,
                command_display(command, field_index, result),
                self._make_command(command.action),
                text=command.name,
                help=command.description,
            )

    async def discover(self) -> Hits:
        """Show every command when input is empty."""
        for command in COMMANDS:
            yield Hit(
                1.0,
                command.name,
                self._make_command(command.action),
                help=command.description,
            )


class FuzzyDemoApp(App):
    """Searchable list demo with a fuzzy command palette."""

    TITLE = "Fuzzy Finder"
    SUB_TITLE = "Type to filter, Enter to pick"

    CSS = """
    Screen {
        padding: 1 2;
    }

    #selection {
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+p", "command_palette", "Commands", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    COMMANDS = App.COMMANDS | {FuzzyCommandProvider}

    def __init__(
        self,
        items: Sequence[str] | None = None,
        config: FuzzyConfig | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.items = list(items) if items is not None else list(DEMO_ITEMS)
        self.match_config = config or FuzzyConfig()
        self.selected: str | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield FuzzySelect(self.items, config=self.match_config, id="search")
        yield Static("Nothing selected", id="selection")
        yield Footer()

    def on_mount(self) -> None:
        """Focus the search box on mount."""
        self.query_one(FuzzySelect).query_one(Input).focus()

    def on_fuzzy_select_selected(self, event: FuzzySelect.Selected) -> None:
        """Show the picked item."""
        self.selected = event.value
        self.query_one("#selection", Static).update(
            Text.assemble("Selected: ", (event.value, MATCH_STYLE))
        )

    def action_set_filter_mode(self, mode: str) -> None:
        """Change the list's filter mode."""
        filter_mode = FilterMode.parse(mode)
        self.query_one(FuzzySelect).set_filter_mode(filter_mode)
        self.sub_title = f"Filter mode: {filter_mode.value}"

    def action_clear_search(self) -> None:
        """Empty the search box."""
        self.query_one(FuzzySelect).clear()
