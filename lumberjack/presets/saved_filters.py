"""
Saved Filters Module - Named filter presets persisted as JSON

A preset captures the log group and the start/end/query fields so a search
can be recalled later. Presets live in a single JSON list on disk.
"""
import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from lumberjack.engine.errors import LumberjackError

logger = logging.getLogger(__name__)


class PresetStoreError(LumberjackError):
    """Presets could not be read or written"""


class SavedFilter(BaseModel):
    name: str
    group: str = ""
    start: str = ""
    end: str = ""
    query: str = ""


class FilterPresetStore:
    """Load, upsert and save filter presets"""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.filters: List[SavedFilter] = []
        self.loaded = False

    def load(self) -> List[SavedFilter]:
        """
        Read presets from disk (a missing file means no presets)

        Raises:
            PresetStoreError: If the file exists but cannot be decoded
        """
        if not self.path.exists():
            self.filters = []
            self.loaded = True
            return self.filters

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self.filters = [SavedFilter.model_validate(item) for item in data]
        except (OSError, ValueError, TypeError, ValidationError) as e:
            logger.error(f"Could not read presets from {self.path}: {e}")
            raise PresetStoreError(f"decode {self.path}: {e}") from e

        self.loaded = True
        logger.info(f"Loaded {len(self.filters)} filter presets")
        return self.filters

    def get(self, name: str) -> Optional[SavedFilter]:
        for preset in self.filters:
            if preset.name == name:
                return preset
        return None

    def upsert(self, preset: SavedFilter) -> None:
        """Add a preset, replacing any existing one with the same name"""
        for i, existing in enumerate(self.filters):
            if existing.name == preset.name:
                self.filters[i] = preset
                return
        self.filters.append(preset)

    def save(self) -> None:
        """
        Write all presets to disk

        Raises:
            PresetStoreError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump([preset.model_dump() for preset in self.filters], f, indent=2)
        except OSError as e:
            logger.error(f"Could not write presets to {self.path}: {e}")
            raise PresetStoreError(f"write {self.path}: {e}") from e
