"""
Mod-registry error types.

All errors inherit from ModError for easy catching.
Errors are explicit and provide actionable messages.
"""

from typing import Iterable


class ModError(Exception):
    """Base exception for all mod registry failures."""
    pass


class MissingModsError(ModError):
    """
    Raised when an activation request names mods the registry does not know.
    
    Carries every missing mod ID in request order, not just the first one.
    The registry is left unchanged whenever this is raised.
    """
    
    def __init__(self, mods: Iterable[str]):
        self.mods = list(mods)
        super().__init__(f"Mods not found: {', '.join(self.mods)}")
