"""
Results Pane Module - Scrollable view over the results buffer

Handles:
- Rendering only the rows in view (the buffer can hold thousands of entries)
- Timestamp, header and error highlighting
- Row / page scrolling and copying all results to the clipboard
"""
import re

from rich.console import RenderableType
from rich.text import Text
from textual.binding import Binding
from textual.reactive import reactive
from textual.widget import Widget

from .results_buffer import ResultsBuffer

TIMESTAMP_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2}T\S+(?:Z|[+-]\d{2}:\d{2}))(.*)$")
ERROR_PATTERN = re.compile(r"^\[\w+ error\]")

TIMESTAMP_STYLE = "bold #64b4b4"
HEADER_STYLE = "bold"
ERROR_STYLE = "red"


def highlight_row(row: str) -> Text:
    """Style a single display row"""
    row = row.replace("\t", "    ")

    if row.startswith("--- ") and row.endswith(" ---"):
        return Text(row, style=HEADER_STYLE)
    if ERROR_PATTERN.match(row):
        return Text(row, style=ERROR_STYLE)

    match = TIMESTAMP_PATTERN.match(row)
    if match:
        return Text.assemble((match.group(1), TIMESTAMP_STYLE), match.group(2))
    return Text(row)


class ResultsPane(Widget, can_focus=True):
    """Results of the current search"""

    BINDINGS = [
        Binding("up", "move(-1)", "Up", show=False),
        Binding("down", "move(1)", "Down", show=False),
        Binding("pageup", "page(-1)", "Page up", show=False),
        Binding("pagedown", "page(1)", "Page down", show=False),
        Binding("home", "top", "Top", show=False),
        Binding("end", "bottom", "Bottom", show=False),
        Binding("y", "copy_results", "Copy"),
    ]

    searching: reactive[bool] = reactive(False)
    dots: reactive[int] = reactive(0)

    def __init__(self, buffer: ResultsBuffer, **kwargs):
        super().__init__(**kwargs)
        self.buffer = buffer

    def render(self) -> RenderableType:
        if self.searching and not self.buffer.entries:
            return Text("Searching" + "." * self.dots, style="dim")

        text = Text(no_wrap=True, overflow="ellipsis")
        for i, row in enumerate(self.buffer.visible(self.size.height)):
            if i:
                text.append("\n")
            text.append_text(highlight_row(row))
        return text

    def action_move(self, delta: int) -> None:
        self.buffer.scroll_by(delta)
        self.refresh()

    def action_page(self, direction: int) -> None:
        self.buffer.scroll_by(direction * max(self.size.height - 1, 1))
        self.refresh()

    def action_top(self) -> None:
        self.buffer.scroll_home()
        self.refresh()

    def action_bottom(self) -> None:
        self.buffer.scroll_end(self.size.height)
        self.refresh()

    def action_copy_results(self) -> None:
        """Copy every result entry to the clipboard"""
        text = self.buffer.text()
        if not text.strip():
            return
        self.app.copy_to_clipboard(text)
        self.notify(f"Copied {len(self.buffer)} lines to clipboard", severity="information")
