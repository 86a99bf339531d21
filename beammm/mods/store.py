"""
File-backed store for the game's mod registry.

BeamNG.drive keeps its mod table in <mods_dir>/db.json. The store loads and
saves that file explicitly; nothing is persisted implicitly.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from ..discovery import DirNotFoundError
from ..persistence import LoadError, read_json, write_json_atomic
from .models import ModRegistry

logger = logging.getLogger(__name__)

REGISTRY_FILENAME = "db.json"


class ModRegistryStore:
    """
    Loads and saves a ModRegistry from a game mods directory.
    
    Thread-safety: Not thread-safe. Single-process, sequential use only.
    """
    
    def __init__(self, mods_dir: Path):
        """
        Initialize the registry store.
        
        Args:
            mods_dir: The game's mods directory (contains db.json)
        """
        self.mods_dir = Path(mods_dir)
    
    @property
    def path(self) -> Path:
        """Location of the registry file."""
        return self.mods_dir / REGISTRY_FILENAME
    
    def load(self) -> ModRegistry:
        """
        Load the registry snapshot.
        
        Returns:
            The loaded registry
            
        Raises:
            DirNotFoundError: If the mods directory does not exist
            LoadError: If db.json is missing, unreadable or malformed
        """
        if not self.mods_dir.is_dir():
            raise DirNotFoundError(self.mods_dir)
        
        data = read_json(self.path)
        if not isinstance(data, dict):
            raise LoadError(self.path, "expected a JSON object")
        
        try:
            registry = ModRegistry.from_dict(data)
        except ValidationError as e:
            raise LoadError(self.path, f"invalid mod registry: {e}") from e
        
        logger.debug(f"Loaded {len(registry.mods)} mod(s) from {self.path}")
        return registry
    
    def save(self, registry: ModRegistry) -> None:
        """
        Persist the registry snapshot.
        
        Args:
            registry: The registry to write
            
        Raises:
            SaveError: If db.json cannot be written
        """
        write_json_atomic(self.path, registry.to_dict())
        logger.info(f"Saved mod registry to {self.path}")
