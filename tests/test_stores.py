"""
Tests for file-backed stores.

Validates:
- db.json load/save with unknown fields preserved
- Preset files: create, list, load, save, delete
- LOUD failures for corrupt data
"""

import json
from pathlib import Path

import pytest

from beammm.discovery import DirNotFoundError
from beammm.mods import ModRegistryStore
from beammm.persistence import LoadError, SaveError, read_json, write_json_atomic
from beammm.presets import (
    InvalidPresetError,
    Preset,
    PresetExistsError,
    PresetNotFoundError,
    PresetStore,
)


class TestJsonFiles:
    """Test the shared JSON helpers."""
    
    def test_write_then_read(self, tmp_path: Path):
        path = tmp_path / "nested" / "doc.json"
        write_json_atomic(path, {"a": [1, 2]})
        
        assert read_json(path) == {"a": [1, 2]}
        assert not (tmp_path / "nested" / "doc.json.tmp").exists()
    
    def test_read_missing_file(self, tmp_path: Path):
        with pytest.raises(LoadError):
            read_json(tmp_path / "missing.json")
    
    def test_read_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        
        with pytest.raises(LoadError) as exc_info:
            read_json(path)
        assert exc_info.value.path == path
    
    def test_write_unserialisable(self, tmp_path: Path):
        with pytest.raises(SaveError):
            write_json_atomic(tmp_path / "x.json", {"a": object()})
    
    def test_failed_write_leaves_no_files(self, tmp_path: Path):
        """A write that fails halfway removes its temp file and keeps the target."""
        path = tmp_path / "x.json"
        write_json_atomic(path, {"a": 1})
    
        with pytest.raises(SaveError):
            write_json_atomic(path, {"a": 2, "b": object()})
    
        assert not (tmp_path / "x.json.tmp").exists()
        assert read_json(path) == {"a": 1}


class TestModRegistryStore:
    """Test loading and saving db.json."""
    
    def test_load(self, mods_dir: Path):
        registry = ModRegistryStore(mods_dir).load()
        
        assert registry.is_mod_active("mod1") is True
        assert registry.is_mod_active("mod2") is False
        assert registry.extra == {"other": {"key": "value"}}
    
    def test_load_missing_dir(self, tmp_path: Path):
        with pytest.raises(DirNotFoundError):
            ModRegistryStore(tmp_path / "bad_path").load()
    
    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(LoadError):
            ModRegistryStore(tmp_path).load()
    
    def test_load_invalid_schema(self, tmp_path: Path):
        (tmp_path / "db.json").write_text(json.dumps({"mods": {"m": {}}}), encoding="utf-8")
        
        with pytest.raises(LoadError):
            ModRegistryStore(tmp_path).load()
    
    def test_load_non_object(self, tmp_path: Path):
        (tmp_path / "db.json").write_text("[]", encoding="utf-8")
    
        with pytest.raises(LoadError):
            ModRegistryStore(tmp_path).load()
    
    def test_load_non_boolean_active_is_rejected(self, tmp_path: Path):
        """A bad flag fails loudly instead of being rewritten on save."""
        content = json.dumps({"mods": {"m": {"active": "yes"}}})
        (tmp_path / "db.json").write_text(content, encoding="utf-8")
    
        with pytest.raises(LoadError):
            ModRegistryStore(tmp_path).load()
        assert (tmp_path / "db.json").read_text(encoding="utf-8") == content
    
    def test_save_round_trip_preserves_unknown_fields(self, mods_dir: Path, db_json):
        store = ModRegistryStore(mods_dir)
        registry = store.load()
        registry.set_mod_active("mod2", True)
        
        store.save(registry)
        
        saved = json.loads((mods_dir / "db.json").read_text(encoding="utf-8"))
        db_json["mods"]["mod2"]["active"] = True
        assert saved == db_json


class TestPresetStore:
    """Test the preset store."""
    
    def test_creates_directory(self, tmp_path: Path):
        PresetStore(tmp_path / "a" / "presets")
        assert (tmp_path / "a" / "presets").is_dir()
    
    def test_create_and_load(self, preset_store: PresetStore):
        created = preset_store.create("racing", ["mod1", "mod2"])
        loaded = preset_store.load("racing")
        
        assert created.enabled is False
        assert loaded.name == "racing"
        assert loaded.mods == ["mod1", "mod2"]
        assert loaded.enabled is False
    
    def test_create_existing_raises(self, preset_store: PresetStore):
        preset_store.create("racing")
        
        with pytest.raises(PresetExistsError):
            preset_store.create("racing", ["mod1"])
        assert preset_store.load("racing").mods == []
    
    def test_create_invalid_name(self, preset_store: PresetStore):
        with pytest.raises(InvalidPresetError):
            preset_store.create("../escape")
    
    def test_list_only_json_files(self, preset_store: PresetStore):
        preset_store.create("b")
        preset_store.create("a")
        (preset_store.presets_dir / "notes.txt").write_text("x", encoding="utf-8")
        (preset_store.presets_dir / "dir.json").mkdir()
        
        assert preset_store.list() == ["a", "b"]
    
    def test_save_overwrites(self, preset_store: PresetStore):
        preset = preset_store.create("p", ["mod1"])
        preset.add_mod("mod2")
        preset.enable()
        preset_store.save(preset)
        
        loaded = preset_store.load("p")
        assert loaded.mods == ["mod1", "mod2"]
        assert loaded.enabled is True
    
    def test_unknown_fields_round_trip(self, preset_store: PresetStore):
        path = preset_store.presets_dir / "p.json"
        path.write_text(
            json.dumps({"name": "p", "mods": [], "enabled": False, "note": "keep"}),
            encoding="utf-8",
        )
        
        preset_store.save(preset_store.load("p"))
        
        assert json.loads(path.read_text(encoding="utf-8"))["note"] == "keep"
    
    def test_load_missing(self, preset_store: PresetStore):
        with pytest.raises(PresetNotFoundError):
            preset_store.load("nope")
    
    def test_load_corrupt(self, preset_store: PresetStore):
        (preset_store.presets_dir / "bad.json").write_text("{", encoding="utf-8")
        
        with pytest.raises(LoadError):
            preset_store.load("bad")
    
    def test_load_name_mismatch(self, preset_store: PresetStore):
        (preset_store.presets_dir / "one.json").write_text(
            json.dumps({"name": "two", "mods": []}), encoding="utf-8"
        )
        
        with pytest.raises(LoadError):
            preset_store.load("one")
    
    def test_delete(self, preset_store: PresetStore):
        preset_store.create("p")
        preset_store.delete("p")
        
        assert not preset_store.exists("p")
        assert preset_store.list() == []
    
    def test_delete_missing(self, preset_store: PresetStore):
        with pytest.raises(PresetNotFoundError):
            preset_store.delete("nope")
    
    def test_iter_presets(self, preset_store: PresetStore):
        preset_store.save(Preset(name="x", mods=["mod1"], enabled=True))
        preset_store.create("y")
        
        presets = {p.name: p for p in preset_store.iter_presets()}
        
        assert set(presets) == {"x", "y"}
        assert presets["x"].enabled is True
