"""
Lumberjack Main Application - Terminal log browser using Textual
"""
from threading import Lock
from typing import Callable, Optional, Tuple

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Header, Footer, Input

from lumberjack.config import Settings
from lumberjack.engine import SearchCoordinator
from lumberjack.presets import FilterPresetStore
from lumberjack.store import CloudWatchLogStore, LogStore
from lumberjack.UI.views import LogBrowserView
from lumberjack.UI.views.log_browser.components import TIME_PRESETS, FilterPane

# Single-key shortcuts that would otherwise swallow typing in a text field
EDITING_GUARDED_ACTIONS = {"quit", "toggle_tail", "load_filter", "save_filter", "time_preset"}


def cached_store_factory(settings: Settings) -> Callable[[], LogStore]:
    """Build the CloudWatch store on first use and reuse it afterwards"""
    store: Optional[LogStore] = None
    lock = Lock()

    def factory() -> LogStore:
        nonlocal store
        with lock:
            if store is None:
                store = CloudWatchLogStore(settings.region, settings.profile)
            return store

    return factory


class LumberjackApp(App):
    """Lumberjack - Terminal UI for browsing and tailing CloudWatch Logs"""

    TITLE = "Lumberjack"
    CSS_PATH = "lumberjack.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("t", "toggle_tail", "Tail"),
        Binding("s", "save_filter", "Save filter"),
        Binding("F,shift+f", "load_filter", "Load filter"),
        Binding("ctrl+x", "stop_search", "Stop"),
        Binding("1", "time_preset('1')", "-5m", show=False),
        Binding("2", "time_preset('2')", "-15m", show=False),
        Binding("3", "time_preset('3')", "-1h", show=False),
        Binding("4", "time_preset('4')", "-24h", show=False),
    ]

    def __init__(self, settings: Optional[Settings] = None,
                 store_factory: Optional[Callable[[], LogStore]] = None,
                 preset_store: Optional[FilterPresetStore] = None):
        super().__init__()
        self.settings = settings or Settings()
        self.coordinator = SearchCoordinator(
            store_factory or cached_store_factory(self.settings),
            poll_interval=self.settings.poll_interval,
        )
        self.preset_store = preset_store or FilterPresetStore(self.settings.filters_path)
        self.sub_title = f"Profile: {self.settings.profile or 'default'} | Region: {self.settings.region}"

    def compose(self) -> ComposeResult:
        """Compose the main UI layout"""
        yield Header()
        yield LogBrowserView(
            self.coordinator,
            self.preset_store,
            max_lines=self.settings.max_lines,
            evict_lines=self.settings.evict_lines,
            id="log-browser-view",
        )
        yield Footer()

    def check_action(self, action: str, parameters: Tuple[object, ...]) -> Optional[bool]:
        """Let shortcut keys through as text while a field is being edited"""
        if action in EDITING_GUARDED_ACTIONS:
            if isinstance(self.focused, Input) or isinstance(self.screen, ModalScreen):
                return False
        return True

    @property
    def browser(self) -> LogBrowserView:
        return self.query_one("#log-browser-view", LogBrowserView)

    def action_toggle_tail(self) -> None:
        self.browser.toggle_tail()

    def action_save_filter(self) -> None:
        self.browser.open_save_filter()

    def action_load_filter(self) -> None:
        self.browser.open_load_filter()

    def action_time_preset(self, key: str) -> None:
        self.query_one("#filter-pane", FilterPane).apply_time_preset(TIME_PRESETS[key])

    def action_stop_search(self) -> None:
        self.browser.stop_search()

    def action_quit(self) -> None:
        self.coordinator.stop()
        self.exit()


def run_app(settings: Optional[Settings] = None) -> None:
    """Entry point to run the Lumberjack application"""
    app = LumberjackApp(settings)
    app.run()
