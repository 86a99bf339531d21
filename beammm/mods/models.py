"""
Data models for the game's mod registry.

The registry mirrors BeamNG.drive's mods/db.json: a mapping of mod ID to
entry, where each entry carries an `active` flag and whatever else the game
chooses to store. Only `active` is interpreted here.

Unknown fields are ALLOWED and preserved verbatim so that saving the
registry never drops data written by the game.
"""

import logging
from typing import Any, Dict, Iterable, KeysView, Optional

from pydantic import BaseModel, ConfigDict, StrictBool

from .errors import MissingModsError

logger = logging.getLogger(__name__)


class ModEntry(BaseModel):
    """
    A single tracked mod.
    
    The entry's ID is its key in ModRegistry.mods; it is not repeated
    inside the entry.
    """
    
    model_config = ConfigDict(extra="allow")
    
    active: StrictBool
    
    @property
    def extra(self) -> Dict[str, Any]:
        """Fields not understood by BeamMM, preserved across load/save."""
        return dict(self.model_extra or {})


class ModRegistry(BaseModel):
    """
    Authoritative mapping from mod ID to activation state.
    
    Entries are only ever created by loading a snapshot; the registry
    never invents or deletes mods. Every activation operation either
    applies to the whole requested batch or changes nothing.
    """
    
    model_config = ConfigDict(extra="allow")
    
    mods: Dict[str, ModEntry]
    
    @property
    def extra(self) -> Dict[str, Any]:
        """Top-level fields not understood by BeamMM."""
        return dict(self.model_extra or {})
    
    def get_mods(self) -> KeysView[str]:
        """
        All known mod IDs.
        
        Returns a live view: it can be iterated more than once and its
        order carries no meaning.
        """
        return self.mods.keys()
    
    def get_mod(self, mod_id: str) -> Optional[ModEntry]:
        """
        Retrieve a mod entry by ID.
        
        Args:
            mod_id: The mod ID
            
        Returns:
            The entry if found, None otherwise
        """
        return self.mods.get(mod_id)
    
    def is_mod_active(self, mod_id: str) -> Optional[bool]:
        """
        Activation state of a mod.
        
        Args:
            mod_id: The mod ID
            
        Returns:
            True/False for known mods, None if the mod is unknown
        """
        entry = self.mods.get(mod_id)
        if entry is None:
            return None
        return entry.active
    
    def set_mod_active(self, mod_id: str, active: bool) -> None:
        """
        Set a single mod active or inactive.
        
        Args:
            mod_id: The mod ID
            active: Desired activation state
            
        Raises:
            MissingModsError: If the mod does not exist (registry unchanged)
        """
        entry = self.mods.get(mod_id)
        if entry is None:
            raise MissingModsError([mod_id])
        
        entry.active = active
        logger.debug(f"Set mod '{mod_id}' active={active}")
    
    def set_mods_active(self, mod_ids: Iterable[str], active: bool) -> None:
        """
        Set a batch of mods active or inactive, all or nothing.
        
        Every ID is validated before anything is written. If any are
        unknown, no entry is touched.
        
        Args:
            mod_ids: Mod IDs to update (order irrelevant, duplicates harmless)
            active: Desired activation state
            
        Raises:
            MissingModsError: Listing every unknown ID, in request order
        """
        mod_ids = list(mod_ids)
        
        # Validate the whole batch first
        missing = [mod_id for mod_id in mod_ids if mod_id not in self.mods]
        if missing:
            raise MissingModsError(missing)
        
        for mod_id in mod_ids:
            self.mods[mod_id].active = active
        
        logger.debug(f"Set {len(mod_ids)} mod(s) active={active}")
    
    def set_all_mods_active(self, active: bool) -> None:
        """
        Set every known mod active or inactive.
        
        Args:
            active: Desired activation state
        """
        self.set_mods_active(list(self.mods), active)
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for JSON storage, unknown fields included."""
        return self.model_dump(mode="json")
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModRegistry":
        """Deserialize from dictionary."""
        return cls.model_validate(data)
