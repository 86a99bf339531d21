"""
Preset-specific error types.

All errors inherit from PresetError for easy catching.
Errors are explicit and provide actionable messages.
"""

from typing import Iterable


class PresetError(Exception):
    """Base exception for all preset failures."""
    pass


class PresetNotFoundError(PresetError):
    """Raised when a named preset is not stored."""
    
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Preset not found: {name}")


class PresetExistsError(PresetError):
    """Raised when creating a preset whose name is already taken."""
    
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Preset already exists: {name}")


class InvalidPresetError(PresetError):
    """Raised when preset data fails validation (e.g. an unusable name)."""
    
    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid preset '{name}': {reason}")


class PresetsFailedError(PresetError):
    """
    Aggregate outcome of applying presets.
    
    One or more enabled presets referenced mods that are not installed.
    Presets that did apply are unaffected.
    """
    
    def __init__(self, mods: Iterable[str], presets: Iterable[str]):
        self.mods = set(mods)
        self.presets = set(presets)
        super().__init__(
            f"Failed to apply presets: {', '.join(sorted(self.presets))} "
            f"(missing mods: {', '.join(sorted(self.mods))})"
        )
