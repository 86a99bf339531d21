"""
Preset system for BeamMM.

Presets group mods under a name so they can be switched on and off
together. Any number of presets may be enabled at once; apply_presets()
merges them into the mod registry.
"""

from .errors import (
    PresetError,
    PresetNotFoundError,
    PresetExistsError,
    InvalidPresetError,
    PresetsFailedError,
)
from .models import Preset
from .store import PresetStore
from .reconcile import apply_presets

__all__ = [
    "PresetError",
    "PresetNotFoundError",
    "PresetExistsError",
    "InvalidPresetError",
    "PresetsFailedError",
    "Preset",
    "PresetStore",
    "apply_presets",
]
