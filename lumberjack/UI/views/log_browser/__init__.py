"""
Log Browser Package - Browse, search and tail a remote log group

Package Structure:
- view: Main view orchestration (LogBrowserView)
- components: Group list and filter form (GroupsPane, FilterPane)
- results_pane: Results display widget (ResultsPane)
- popups: Save / load filter dialogs (SaveFilterScreen, LoadFilterScreen)
- results_buffer: Bounded display buffer (ResultsBuffer)
- group_search: Fuzzy group matching (fuzzy_match, filter_groups)
"""
from .view import LogBrowserView

from .components import FilterPane, GroupsPane
from .results_pane import ResultsPane
from .popups import LoadFilterScreen, SaveFilterScreen
from .results_buffer import ResultsBuffer
from .group_search import NO_MATCHES, filter_groups, fuzzy_match

__all__ = [
    # Main view
    'LogBrowserView',

    # UI components
    'GroupsPane',
    'FilterPane',
    'ResultsPane',
    'SaveFilterScreen',
    'LoadFilterScreen',

    # Core components
    'ResultsBuffer',
    'NO_MATCHES',
    'filter_groups',
    'fuzzy_match',
]
