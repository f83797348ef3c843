"""
Results Buffer Module - Bounded display buffer for the results pane

Handles:
- Appending result entries in arrival order (an entry may span many rows)
- Capping memory for long tails by evicting the oldest entries
- Keeping the scroll offset (in rows) valid across appends and evictions
"""
from typing import List

DEFAULT_MAX_ENTRIES = 2000
DEFAULT_EVICT_ENTRIES = 500


class ResultsBuffer:
    """
    Ordered, capped list of result entries plus a row-based scroll offset

    Only the UI loop touches the buffer, so it needs no locking.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES,
                 evict_entries: int = DEFAULT_EVICT_ENTRIES):
        """
        Args:
            max_entries: Entry count above which eviction kicks in
            evict_entries: Number of oldest entries dropped on overflow
        """
        self.max_entries = max_entries
        self.evict_entries = max(1, min(evict_entries, max_entries))
        self.entries: List[str] = []
        self.scroll = 0
        self._row_counts: List[int] = []

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def total_rows(self) -> int:
        return sum(self._row_counts)

    def append(self, text: str) -> None:
        """Append one entry, evicting the oldest ones if over capacity"""
        self.entries.append(text)
        self._row_counts.append(len(text.splitlines()))

        if len(self.entries) > self.max_entries:
            removed_rows = sum(self._row_counts[:self.evict_entries])
            del self.entries[:self.evict_entries]
            del self._row_counts[:self.evict_entries]
            # Keep the same content in view where possible
            self.scroll = max(0, self.scroll - removed_rows)

        self.clamp_scroll()

    def extend(self, texts) -> None:
        for text in texts:
            self.append(text)

    def clear(self) -> None:
        self.entries.clear()
        self._row_counts.clear()
        self.scroll = 0

    def clamp_scroll(self) -> None:
        self.scroll = max(0, min(self.scroll, self.total_rows - 1))

    def scroll_by(self, delta: int) -> None:
        self.scroll += delta
        self.clamp_scroll()

    def scroll_home(self) -> None:
        self.scroll = 0

    def scroll_end(self, view_height: int = 1) -> None:
        """Scroll so the last row is at the bottom of a view of the given height"""
        self.scroll = max(0, self.total_rows - max(view_height, 1))

    def rows(self) -> List[str]:
        """Flatten entries into display rows"""
        flattened = []
        for entry in self.entries:
            flattened.extend(entry.splitlines())
        return flattened

    def visible(self, height: int) -> List[str]:
        """Rows in view for a pane of the given height"""
        if height <= 0:
            return []
        return self.rows()[self.scroll:self.scroll + height]

    def text(self) -> str:
        """All entries joined with newlines (for copying)"""
        return "\n".join(self.entries)
