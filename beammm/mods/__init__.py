"""
Mod registry for BeamMM.

Owns the game's mod activation table and its all-or-nothing batch
activation semantics.
"""

from .errors import ModError, MissingModsError
from .models import ModEntry, ModRegistry
from .store import ModRegistryStore, REGISTRY_FILENAME

__all__ = [
    "ModError",
    "MissingModsError",
    "ModEntry",
    "ModRegistry",
    "ModRegistryStore",
    "REGISTRY_FILENAME",
]
