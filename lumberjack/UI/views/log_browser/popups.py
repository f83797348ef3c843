"""
Log Browser Popups Module - Save / load filter preset dialogs
"""
from typing import List, Optional

from rich.text import Text

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label, OptionList
from textual.widgets.option_list import Option

from lumberjack.presets import SavedFilter


class SaveFilterScreen(ModalScreen[Optional[str]]):
    """Ask for a preset name; dismisses with the name or None"""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def compose(self) -> ComposeResult:
        with Vertical(id="save-filter-dialog", classes="popup"):
            yield Label("[bold]Save filter[/bold]", classes="panel-title")
            yield Input(placeholder="Filter name", id="save-filter-name")
            yield Label("[dim]Enter to save, Esc to cancel[/dim]")

    def on_mount(self) -> None:
        self.query_one("#save-filter-name", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        name = event.value.strip()
        self.dismiss(name or None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class LoadFilterScreen(ModalScreen[Optional[SavedFilter]]):
    """Pick a saved preset; dismisses with the preset or None"""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, presets: List[SavedFilter], **kwargs):
        super().__init__(**kwargs)
        self.presets = list(presets)

    def compose(self) -> ComposeResult:
        with Vertical(id="load-filter-dialog", classes="popup"):
            yield Label("[bold]Load filter[/bold]", classes="panel-title")
            yield OptionList(
                *[Option(self._describe(preset)) for preset in self.presets],
                id="load-filter-list",
            )
            yield Label("[dim]Enter to load, Esc to cancel[/dim]")

    @staticmethod
    def _describe(preset: SavedFilter) -> Text:
        window = f"{preset.start or '-15m'} .. {preset.end or 'now'}"
        return Text.assemble((preset.name, "bold"), "  ", (f"{window}  {preset.query}", "dim"))

    def on_mount(self) -> None:
        option_list = self.query_one("#load-filter-list", OptionList)
        if self.presets:
            option_list.highlighted = 0
        option_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(self.presets[event.option_index])

    def action_cancel(self) -> None:
        self.dismiss(None)
