import json

import pytest

from lumberjack.presets import FilterPresetStore, PresetStoreError, SavedFilter


@pytest.fixture
def presets_path(tmp_path):
    return tmp_path / "config" / "filters.json"


def test_missing_file_means_no_presets(presets_path):
    store = FilterPresetStore(presets_path)
    assert store.load() == []
    assert store.loaded


def test_save_and_reload(presets_path):
    store = FilterPresetStore(presets_path)
    store.upsert(SavedFilter(name="errors", group="/ecs/web", start="-1h", query="level:error"))
    store.save()

    data = json.loads(presets_path.read_text(encoding="utf-8"))
    assert data == [{"name": "errors", "group": "/ecs/web", "start": "-1h", "end": "", "query": "level:error"}]

    reloaded = FilterPresetStore(presets_path)
    reloaded.load()
    assert reloaded.get("errors").query == "level:error"


def test_upsert_replaces_by_name(presets_path):
    store = FilterPresetStore(presets_path)
    store.upsert(SavedFilter(name="a", query="x=1"))
    store.upsert(SavedFilter(name="b"))
    store.upsert(SavedFilter(name="a", query="x=2"))
    assert [p.name for p in store.filters] == ["a", "b"]
    assert store.get("a").query == "x=2"
    assert store.get("missing") is None


def test_corrupt_file_raises(presets_path):
    presets_path.parent.mkdir(parents=True)
    presets_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PresetStoreError):
        FilterPresetStore(presets_path).load()


def test_wrong_shape_raises(presets_path):
    presets_path.parent.mkdir(parents=True)
    presets_path.write_text('[{"group": "no name"}]', encoding="utf-8")
    with pytest.raises(PresetStoreError):
        FilterPresetStore(presets_path).load()


def test_unwritable_path_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = FilterPresetStore(blocker / "filters.json")
    store.upsert(SavedFilter(name="a"))
    with pytest.raises(PresetStoreError):
        store.save()
