"""
Presets - File-Backed JSON Store

One JSON file per preset: <presets_dir>/<name>.json.
The preset name is the storage key.

Listing order is alphabetical for display only; nothing relies on it.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

from pydantic import ValidationError

from ..persistence import LoadError, read_json, write_json_atomic
from .errors import InvalidPresetError, PresetExistsError, PresetNotFoundError
from .models import Preset

logger = logging.getLogger(__name__)

PRESET_SUFFIX = ".json"


class PresetStore:
    """
    Simple file-backed store for presets.
    
    Validation errors on read are LOUD: a corrupt preset file raises
    rather than being skipped.
    
    Thread-safety: Not thread-safe. Single-process, sequential use only.
    """
    
    def __init__(self, presets_dir: Path):
        """
        Initialize the preset store.
        
        Args:
            presets_dir: Directory where preset JSON files are stored
        """
        self.presets_dir = Path(presets_dir)
        self.presets_dir.mkdir(parents=True, exist_ok=True)
    
    def _path(self, name: str) -> Path:
        return self.presets_dir / f"{name}{PRESET_SUFFIX}"
    
    def list(self) -> List[str]:
        """
        List stored preset names.
        
        Returns:
            Names sorted alphabetically
        """
        names = [
            path.stem
            for path in self.presets_dir.glob(f"*{PRESET_SUFFIX}")
            if path.is_file() and not path.name.startswith(".")
        ]
        return sorted(names)
    
    def exists(self, name: str) -> bool:
        """Check whether a preset is stored under this name."""
        return self._path(name).is_file()
    
    def load(self, name: str) -> Preset:
        """
        Load a preset by name.
        
        Args:
            name: The preset name
            
        Returns:
            The loaded preset
            
        Raises:
            PresetNotFoundError: If no such preset is stored
            LoadError: If the file is unreadable, malformed, or stored
                under a different name than it declares
        """
        path = self._path(name)
        if not path.is_file():
            raise PresetNotFoundError(name)
        
        data = read_json(path)
        if not isinstance(data, dict):
            raise LoadError(path, "expected a JSON object")
        
        try:
            preset = Preset.from_dict(data)
        except ValidationError as e:
            raise LoadError(path, f"invalid preset: {e}") from e
        
        if preset.name != name:
            raise LoadError(path, f"file declares preset name '{preset.name}'")
        
        return preset
    
    def iter_presets(self) -> Iterator[Preset]:
        """
        Lazily load every stored preset.
        
        Load failures propagate out of the iteration.
        """
        for name in self.list():
            yield self.load(name)
    
    def save(self, preset: Preset) -> None:
        """
        Persist a preset, replacing any stored version.
        
        Raises:
            SaveError: If the file cannot be written
        """
        write_json_atomic(self._path(preset.name), preset.to_dict())
        logger.info(f"Saved preset '{preset.name}'")
    
    def create(self, name: str, mods: Iterable[str] = ()) -> Preset:
        """
        Create and store a new, disabled preset.
        
        Args:
            name: Preset name (must be unique)
            mods: Initial mod IDs
            
        Returns:
            The created preset
            
        Raises:
            InvalidPresetError: If the name is not usable
            PresetExistsError: If the name is already taken
        """
        try:
            preset = Preset(name=name, mods=list(mods))
        except ValidationError as e:
            raise InvalidPresetError(name, str(e.errors()[0]["msg"])) from e
        
        if self.exists(name):
            raise PresetExistsError(name)
        
        self.save(preset)
        return preset
    
    def delete(self, name: str) -> None:
        """
        Delete a stored preset.
        
        Deleting does not change any mod's activation state.
        
        Raises:
            PresetNotFoundError: If no such preset is stored
        """
        path = self._path(name)
        if not path.is_file():
            raise PresetNotFoundError(name)
        
        path.unlink()
        logger.info(f"Deleted preset '{name}'")
