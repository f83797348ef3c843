"""
Log Browser View Module - Main UI orchestration

Handles:
- Layout of the groups, filter and results panes
- Starting / stopping searches through the SearchCoordinator
- Draining the result stream every frame into the results buffer
- Tail toggle, time presets and saved filter presets
- Loading the log group list in the background
"""
import logging
from typing import List, Optional

from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.timer import Timer
from textual.widgets import Checkbox

from lumberjack.engine import SearchCoordinator
from lumberjack.presets import FilterPresetStore, PresetStoreError, SavedFilter

from .components import FilterPane, GroupsPane
from .popups import LoadFilterScreen, SaveFilterScreen
from .results_buffer import ResultsBuffer
from .results_pane import ResultsPane

logger = logging.getLogger(__name__)

FRAME_INTERVAL = 0.05
DOTS_INTERVAL = 0.25
DRAIN_LIMIT = 500


class LogBrowserView(Vertical):
    """
    Browse a log group: pick it, filter it, read or tail its events

    The view is the only consumer of the coordinator's result stream; it
    drains it on a timer so the UI never waits on the network.
    """

    def __init__(self, coordinator: SearchCoordinator, preset_store: FilterPresetStore,
                 max_lines: int = 2000, evict_lines: int = 500, **kwargs):
        """
        Initialize the log browser

        Args:
            coordinator: Owner of the background search session
            preset_store: Saved filter presets
            max_lines: Results buffer capacity (entries)
            evict_lines: Entries dropped when the buffer overflows
        """
        super().__init__(**kwargs)
        self.coordinator = coordinator
        self.preset_store = preset_store
        self.buffer = ResultsBuffer(max_lines, evict_lines)

        # State
        self.searching = False
        self.tail_mode = False
        self.search_group: Optional[str] = None
        self._drain_timer: Optional[Timer] = None
        self._dots_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="top-row"):
            yield GroupsPane(id="groups-pane")
            yield FilterPane(id="filter-pane")
        yield ResultsPane(self.buffer, id="results-pane")

    def on_mount(self) -> None:
        self._drain_timer = self.set_interval(FRAME_INTERVAL, self._drain_results)
        self._dots_timer = self.set_interval(DOTS_INTERVAL, self._tick_dots)
        self._load_groups()

    # Group list

    @work(thread=True, exclusive=True, group="groups")
    def _load_groups(self) -> None:
        """Fetch log group names in a background thread"""
        try:
            groups = self.coordinator.list_groups()
        except Exception as e:
            logger.error(f"Error fetching log groups: {e}", exc_info=True)
            self.app.call_from_thread(self._groups_failed, str(e))
            return
        self.app.call_from_thread(self._groups_loaded, groups)

    def _groups_loaded(self, groups: List[str]) -> None:
        groups_pane = self.query_one("#groups-pane", GroupsPane)
        if groups:
            groups_pane.set_groups(groups)
        else:
            groups_pane.show_placeholder("(no log groups found)")

    def _groups_failed(self, message: str) -> None:
        self.query_one("#groups-pane", GroupsPane).show_placeholder("(error fetching log groups)")
        self.notify(f"Error fetching log groups: {message}", severity="error")

    # Searching

    def start_search(self) -> None:
        """Start a search (or tail) for the selected group and filter"""
        group = self.query_one("#groups-pane", GroupsPane).selected_group
        if group is None:
            self.notify("Select a log group first", severity="warning")
            return

        filter_pane = self.query_one("#filter-pane", FilterPane)
        results = self.query_one("#results-pane", ResultsPane)

        self.buffer.clear()
        self.searching = True
        self.search_group = group
        results.dots = 0
        results.searching = True
        results.refresh()
        results.focus()

        self.coordinator.start(
            group,
            filter_pane.start_spec,
            filter_pane.end_spec,
            filter_pane.query_text,
            tail=self.tail_mode,
        )

    def stop_search(self) -> None:
        self.coordinator.stop()

    def _drain_results(self) -> None:
        """Move queued results into the buffer, preserving worker order"""
        lines = self.coordinator.drain(limit=DRAIN_LIMIT)
        if not lines:
            return

        results = self.query_one("#results-pane", ResultsPane)
        for line in lines:
            if line.is_done:
                self.searching = False
                results.searching = False
                results.focus()
                continue
            self.buffer.append(line.text)

        results.refresh()

    def _tick_dots(self) -> None:
        if self.searching:
            results = self.query_one("#results-pane", ResultsPane)
            results.dots = (results.dots + 1) % 7

    @on(FilterPane.SearchRequested)
    def handle_search_requested(self) -> None:
        self.start_search()

    # Tail mode

    def toggle_tail(self) -> None:
        checkbox = self.query_one("#tail-checkbox", Checkbox)
        checkbox.value = not checkbox.value

    @on(Checkbox.Changed, "#tail-checkbox")
    def handle_tail_changed(self, event: Checkbox.Changed) -> None:
        self.set_tail_mode(event.value)

    def set_tail_mode(self, enabled: bool) -> None:
        if enabled == self.tail_mode:
            return
        self.tail_mode = enabled
        if enabled:
            self.notify("Tail mode on: the next search keeps polling", severity="information")
        else:
            self.stop_search()
            self.notify("Tail mode off", severity="information")

    # Saved filters

    def open_save_filter(self) -> None:
        self.app.push_screen(SaveFilterScreen(), self._save_filter)

    def _save_filter(self, name: Optional[str]) -> None:
        if not name:
            return

        if not self.preset_store.loaded:
            self._load_presets()

        filter_pane = self.query_one("#filter-pane", FilterPane)
        preset = SavedFilter(
            name=name,
            group=self.query_one("#groups-pane", GroupsPane).selected_group or "",
            start=filter_pane.start_spec,
            end=filter_pane.end_spec,
            query=filter_pane.query_text,
        )
        self.preset_store.upsert(preset)

        try:
            self.preset_store.save()
        except PresetStoreError as e:
            self.notify(f"Error saving filter \"{name}\": {e}", severity="error")
            return
        self.notify(f"Saved filter \"{name}\"", severity="information")

    def _load_presets(self) -> bool:
        try:
            self.preset_store.load()
        except PresetStoreError as e:
            self.notify(f"Error loading filters: {e}", severity="error")
            return False
        return True

    def open_load_filter(self) -> None:
        if not self.preset_store.loaded and not self._load_presets():
            return

        if not self.preset_store.filters:
            self.notify("No saved filters", severity="warning")
            return

        self.app.push_screen(LoadFilterScreen(self.preset_store.filters), self._apply_preset)

    def _apply_preset(self, preset: Optional[SavedFilter]) -> None:
        if preset is None:
            return

        self.query_one("#filter-pane", FilterPane).set_fields(preset.start, preset.end, preset.query)
        if preset.group:
            self.query_one("#groups-pane", GroupsPane).select_group(preset.group)
        self.notify(f"Loaded filter \"{preset.name}\"", severity="information")

    def on_unmount(self) -> None:
        """Clean up when view is unmounted"""
        if self._drain_timer:
            self._drain_timer.stop()
            self._drain_timer = None
        if self._dots_timer:
            self._dots_timer.stop()
            self._dots_timer = None
        self.coordinator.shutdown()
