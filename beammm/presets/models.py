"""
Data model for mod presets.

A preset is a named, user-managed group of mod IDs with its own enabled
flag. Presets reference mods by ID only; they never own a registry and
may name mods that are not installed.

Enabling and disabling are deliberately asymmetric:
- enable() only records intent; apply_presets() activates the mods later
- disable() deactivates the preset's mods in the registry immediately
"""

import logging
from typing import Any, Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from ..mods import MissingModsError, ModRegistry

logger = logging.getLogger(__name__)


class Preset(BaseModel):
    """
    A named group of mods that can be toggled as a unit.
    
    Mod order is kept for display only. Duplicate IDs are allowed and
    have no effect on activation.
    
    Unknown fields are ALLOWED and preserved across load/save.
    """
    
    model_config = ConfigDict(extra="allow")
    
    name: str
    mods: List[str] = Field(default_factory=list)
    enabled: StrictBool = False
    
    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Name is the storage key: non-empty and usable as a file name."""
        if not v or not v.strip():
            raise ValueError("Preset name cannot be empty")
        if "/" in v or "\\" in v:
            raise ValueError("Preset name cannot contain path separators")
        if v.startswith("."):
            raise ValueError("Preset name cannot start with '.'")
        return v
    
    @property
    def extra(self) -> Dict[str, Any]:
        """Fields not understood by BeamMM, preserved across load/save."""
        return dict(self.model_extra or {})
    
    def add_mod(self, mod_id: str) -> None:
        """Append a mod. No de-duplication, no existence check."""
        self.mods.append(mod_id)
    
    def add_mods(self, mod_ids: Iterable[str]) -> None:
        """Append several mods in order."""
        self.mods.extend(mod_ids)
    
    def remove_mod(self, mod_id: str) -> None:
        """
        Remove every occurrence of a mod.
        
        Removing a mod that is not in the preset does nothing.
        """
        self.remove_mods([mod_id])
    
    def remove_mods(self, mod_ids: Iterable[str]) -> None:
        """Remove every occurrence of each given mod. Unknown IDs are ignored."""
        to_remove = set(mod_ids)
        self.mods = [m for m in self.mods if m not in to_remove]
    
    def enable(self) -> None:
        """
        Mark the preset enabled.
        
        Does NOT touch any registry. The mods become active when
        apply_presets() is next run against the stored presets.
        """
        self.enabled = True
        logger.debug(f"Preset '{self.name}' enabled")
    
    def disable(self, registry: ModRegistry) -> None:
        """
        Deactivate this preset's mods immediately, then mark it disabled.
        
        Mods shared with other enabled presets are switched back on by
        the next apply_presets() pass.
        
        Args:
            registry: Registry to deactivate the mods in
            
        Raises:
            MissingModsError: If any of the preset's mods are unknown.
                Both the registry and this preset are left unchanged.
        """
        registry.set_mods_active(self.mods, False)
        self.enabled = False
        logger.debug(f"Preset '{self.name}' disabled, {len(self.mods)} mod(s) deactivated")
    
    def force_disable(self, registry: ModRegistry) -> List[str]:
        """
        Best-effort disable that cannot fail.
        
        Marks the preset disabled, then deactivates each mod on its own,
        skipping mods the registry does not know. Used to recover presets
        that apply_presets() reported as failed.
        
        Args:
            registry: Registry to deactivate the mods in
            
        Returns:
            IDs that were skipped because they are not installed
        """
        self.enabled = False
        
        skipped = []
        for mod_id in self.mods:
            try:
                registry.set_mod_active(mod_id, False)
            except MissingModsError:
                skipped.append(mod_id)
        
        if skipped:
            logger.warning(
                f"Preset '{self.name}' force-disabled; skipped missing mods: {', '.join(skipped)}"
            )
        return skipped
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for JSON storage, unknown fields included."""
        return self.model_dump(mode="json")
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Preset":
        """Deserialize from dictionary."""
        return cls.model_validate(data)
