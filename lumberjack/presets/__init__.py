"""
Filter Presets Package - Named, persisted search filters
"""
from .saved_filters import FilterPresetStore, PresetStoreError, SavedFilter

__all__ = [
    'FilterPresetStore',
    'PresetStoreError',
    'SavedFilter',
]
