"""
BeamMM - mod and preset manager for BeamNG.drive.

Tracks which mods the game should load and lets users group mods into
named, independently toggleable presets.

Core pieces:
- ModRegistry: the game's mod activation table (db.json)
- Preset: a named group of mod IDs with an enabled flag
- apply_presets: merges every enabled preset into the registry
"""

from .mods import ModEntry, ModRegistry, ModRegistryStore, MissingModsError
from .presets import (
    Preset,
    PresetStore,
    apply_presets,
    PresetsFailedError,
    PresetNotFoundError,
    PresetExistsError,
)

__version__ = "0.1.0"

__all__ = [
    "ModEntry",
    "ModRegistry",
    "ModRegistryStore",
    "MissingModsError",
    "Preset",
    "PresetStore",
    "apply_presets",
    "PresetsFailedError",
    "PresetNotFoundError",
    "PresetExistsError",
]
