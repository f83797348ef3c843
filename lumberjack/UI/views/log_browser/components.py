"""
Log Browser Components Module - Group list and filter form

Handles:
- Log group list with fuzzy search
- Start / End / Query inputs, Search button and Tail toggle
- Quick time presets
"""
from typing import List, Optional

from rich.text import Text

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Checkbox, Input, Label, OptionList, Static
from textual.widgets.option_list import Option

from .group_search import NO_MATCHES, filter_groups

TIME_PRESETS = {
    "1": "-5m",
    "2": "-15m",
    "3": "-1h",
    "4": "-24h",
}


class GroupsPane(Vertical):
    """Selectable list of log groups with "/" fuzzy search"""

    BINDINGS = [
        Binding("slash", "begin_search", "Search groups"),
        Binding("escape", "cancel_search", "Cancel search", show=False),
    ]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.all_groups: List[str] = []
        self.visible_groups: List[str] = []
        self.search_active = False

    def compose(self) -> ComposeResult:
        yield Label("[bold]Groups[/bold]", classes="panel-title")
        yield Input(placeholder="Search groups...", id="group-search-input", classes="hidden")
        yield OptionList(Option("Loading log groups...", disabled=True), id="groups-list")

    @property
    def selected_group(self) -> Optional[str]:
        """Currently highlighted group, or None"""
        option_list = self.query_one("#groups-list", OptionList)
        index = option_list.highlighted
        if index is None or not (0 <= index < len(self.visible_groups)):
            return None
        group = self.visible_groups[index]
        return None if group == NO_MATCHES else group

    def set_groups(self, groups: List[str]) -> None:
        """Replace the full group list"""
        self.all_groups = list(groups)
        self._show(self.all_groups)

    def show_placeholder(self, text: str) -> None:
        self.all_groups = []
        self.visible_groups = []
        option_list = self.query_one("#groups-list", OptionList)
        option_list.clear_options()
        option_list.add_option(Option(Text(text), disabled=True))

    def select_group(self, group: str) -> bool:
        """Highlight a group by name; returns False if it is not listed"""
        if group not in self.visible_groups:
            if group not in self.all_groups:
                return False
            self._show(self.all_groups)
        option_list = self.query_one("#groups-list", OptionList)
        option_list.highlighted = self.visible_groups.index(group)
        return True

    def _show(self, groups: List[str]) -> None:
        self.visible_groups = list(groups)
        option_list = self.query_one("#groups-list", OptionList)
        option_list.clear_options()
        option_list.add_options(
            [Option(Text(group), disabled=(group == NO_MATCHES)) for group in self.visible_groups]
        )
        if self.visible_groups and self.visible_groups[0] != NO_MATCHES:
            option_list.highlighted = 0

    def apply_search(self, needle: str) -> None:
        self._show(filter_groups(self.all_groups, needle))

    def action_begin_search(self) -> None:
        search_input = self.query_one("#group-search-input", Input)
        search_input.remove_class("hidden")
        self.search_active = True
        search_input.focus()

    def action_cancel_search(self) -> None:
        if not self.search_active:
            return
        search_input = self.query_one("#group-search-input", Input)
        search_input.value = ""
        search_input.add_class("hidden")
        self.search_active = False
        self._show(self.all_groups)
        self.query_one("#groups-list", OptionList).focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Enter on a group moves on to the filter form"""
        if event.option_list.id == "groups-list":
            self.app.query_one("#filter-start", Input).focus()
            event.stop()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "group-search-input" and self.search_active:
            self.apply_search(event.value)
            event.stop()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter keeps the narrowed list and returns to it"""
        if event.input.id == "group-search-input":
            self.search_active = False
            event.input.add_class("hidden")
            self.query_one("#groups-list", OptionList).focus()
            event.stop()


class FilterPane(Vertical):
    """Start / End / Query form with the Search button and Tail toggle"""

    class SearchRequested(Message):
        """Posted when the user asks for a search"""

    def compose(self) -> ComposeResult:
        yield Label("[bold]Filter[/bold]", classes="panel-title")
        with Horizontal(classes="filter-row"):
            yield Label("Start:", classes="control-label")
            yield Input(placeholder="-15m", id="filter-start")
        with Horizontal(classes="filter-row"):
            yield Label("End:", classes="control-label")
            yield Input(placeholder="now", id="filter-end")
        with Horizontal(classes="filter-row"):
            yield Label("Query:", classes="control-label")
            yield Input(placeholder="level:error  or  { $.status = 500 }", id="filter-query")
        with Horizontal(classes="filter-row"):
            yield Button("Search", id="search-btn", variant="primary")
            yield Checkbox("Tail", id="tail-checkbox")
        yield Static(
            "[dim]1:-5m  2:-15m  3:-1h  4:-24h   s:save  F:load[/dim]",
            id="filter-hints",
        )

    @property
    def start_spec(self) -> str:
        return self.query_one("#filter-start", Input).value

    @property
    def end_spec(self) -> str:
        return self.query_one("#filter-end", Input).value

    @property
    def query_text(self) -> str:
        return self.query_one("#filter-query", Input).value

    def set_fields(self, start: str, end: str, query: str) -> None:
        self.query_one("#filter-start", Input).value = start
        self.query_one("#filter-end", Input).value = end
        self.query_one("#filter-query", Input).value = query

    def apply_time_preset(self, start: str) -> None:
        """Set a relative start and an open end ("now")"""
        self.query_one("#filter-start", Input).value = start
        self.query_one("#filter-end", Input).value = ""
        self.query_one("#filter-query", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "search-btn":
            self.post_message(self.SearchRequested())
            event.stop()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id in ("filter-start", "filter-end", "filter-query"):
            self.post_message(self.SearchRequested())
            event.stop()
