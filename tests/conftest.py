"""
Pytest configuration and shared fixtures for the BeamMM test suite.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to Python path for test imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from beammm.mods import ModRegistry
from beammm.presets import PresetStore


# NOTE: Several tests depend on this exact layout (mod1 active, mod2 inactive)
DB_JSON = {
    "mods": {
        "mod1": {
            "active": True,
            "other": {"key": "value"},
        },
        "mod2": {
            "active": False,
            "other": {"key": "value"},
        },
    },
    "other": {"key": "value"},
}


@pytest.fixture
def db_json() -> dict:
    """A fresh copy of the sample db.json document."""
    return json.loads(json.dumps(DB_JSON))


@pytest.fixture
def registry(db_json) -> ModRegistry:
    """Registry with mod1 (active) and mod2 (inactive)."""
    return ModRegistry.from_dict(db_json)


@pytest.fixture
def mods_dir(tmp_path: Path, db_json) -> Path:
    """A mods directory containing the sample db.json."""
    path = tmp_path / "mods"
    path.mkdir()
    (path / "db.json").write_text(json.dumps(db_json), encoding="utf-8")
    return path


@pytest.fixture
def preset_store(tmp_path: Path) -> PresetStore:
    """An empty preset store."""
    return PresetStore(tmp_path / "presets")


@pytest.fixture
def game_env(tmp_path: Path, db_json, monkeypatch):
    """
    A fake BeamNG.drive install plus BeamMM home, wired up via env overrides.
    
    Returns a dict with the data dir, mods dir and presets dir.
    """
    data_dir = tmp_path / "BeamNG.drive"
    mods = data_dir / "0.32" / "mods"
    mods.mkdir(parents=True)
    (data_dir / "version.txt").write_text("0.32.1.0\n", encoding="utf-8")
    (mods / "db.json").write_text(json.dumps(db_json), encoding="utf-8")
    
    home = tmp_path / "BeamMM"
    monkeypatch.setenv("BEAMMM_BEAMNG_DIR", str(data_dir))
    monkeypatch.setenv("BEAMMM_HOME", str(home))
    
    return {
        "data_dir": data_dir,
        "mods_dir": mods,
        "presets_dir": home / "presets",
    }
