"""
BeamNG.drive and BeamMM directory discovery.

Platform-specific logic to locate the game's user data directory, the
active game version and its mods folder, plus BeamMM's own state
directory.

Supports Windows, macOS and Linux with optional environment variable
overrides.
"""

import logging
import math
import os
import sys
from pathlib import Path
from typing import List, Optional

from .errors import DirNotFoundError, GameDirNotFoundError, VersionError

logger = logging.getLogger(__name__)

# Environment variable overrides (optional)
ENV_BEAMNG_DIR = "BEAMMM_BEAMNG_DIR"
ENV_BEAMMM_HOME = "BEAMMM_HOME"

GAME_DIR_NAME = "BeamNG.drive"
BEAMMM_DIR_NAME = "BeamMM"
PRESETS_DIR_NAME = "presets"
VERSION_FILENAME = "version.txt"


def _local_data_dir() -> Path:
    """Per-user, machine-local data directory for the current platform."""
    if sys.platform == "win32":
        local = os.environ.get("LOCALAPPDATA")
        if local:
            return Path(local)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME")
    return Path(xdg) if xdg else Path.home() / ".local" / "share"


def _roaming_data_dir() -> Path:
    """Per-user roaming data directory (same as local outside Windows)."""
    if sys.platform == "win32":
        roaming = os.environ.get("APPDATA")
        if roaming:
            return Path(roaming)
        return Path.home() / "AppData" / "Roaming"
    return _local_data_dir()


def _ensure_dir(path: Path) -> Path:
    """Create a directory if it does not exist and return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def beamng_dir(custom_dir: Optional[Path] = None) -> Path:
    """
    Locate the BeamNG.drive user data directory.
    
    Discovery priority:
    1. Explicit custom directory
    2. Environment variable override (BEAMMM_BEAMNG_DIR)
    3. BeamNG.drive under the local, then roaming, data directory
    
    Args:
        custom_dir: Optional directory chosen by the user
    
    Returns:
        The game's data directory
    
    Raises:
        DirNotFoundError: If a custom or override directory does not exist
        GameDirNotFoundError: If no data directory can be found
    """
    if custom_dir is not None:
        custom_dir = Path(custom_dir)
        if not custom_dir.is_dir():
            raise DirNotFoundError(custom_dir)
        return custom_dir
    
    override_path = os.environ.get(ENV_BEAMNG_DIR)
    if override_path:
        override_dir = Path(override_path)
        if not override_dir.is_dir():
            raise DirNotFoundError(override_dir)
        return override_dir
    
    candidates: List[Path] = [
        _local_data_dir() / GAME_DIR_NAME,
        _roaming_data_dir() / GAME_DIR_NAME,
    ]
    for candidate in candidates:
        if candidate.is_dir():
            logger.debug(f"Found BeamNG.drive data directory: {candidate}")
            return candidate
    
    raise GameDirNotFoundError(
        f"BeamNG.drive data directory not found (looked in: "
        f"{', '.join(str(c) for c in candidates)}). "
        f"Launch the game once, pass --data-dir, or set {ENV_BEAMNG_DIR}."
    )


def game_version(data_dir: Path) -> str:
    """
    Determine the game's major.minor version, e.g. "0.32".
    
    Reads version.txt when present. Otherwise falls back to the
    highest-numbered version directory inside data_dir.
    
    Args:
        data_dir: The game's data directory
    
    Returns:
        The version string used for the game's per-version folder
    
    Raises:
        DirNotFoundError: If data_dir does not exist
        VersionError: If the version cannot be parsed or inferred
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DirNotFoundError(data_dir)
    
    version_path = data_dir / VERSION_FILENAME
    if version_path.is_file():
        full_version = version_path.read_text(encoding="utf-8").strip()
        parts = full_version.split(".")
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise VersionError(f"Unrecognised version in {version_path}: {full_version!r}")
        return f"{parts[0]}.{parts[1]}"
    
    # No version.txt: assume the newest version directory is the active one
    versions = []
    for child in data_dir.iterdir():
        if not child.is_dir():
            continue
        try:
            number = float(child.name)
        except ValueError:
            continue
        if math.isfinite(number):
            versions.append((number, child.name))
    
    if not versions:
        raise VersionError(f"Cannot determine game version in {data_dir}")
    
    return max(versions)[1]


def mods_dir(data_dir: Path, version: str) -> Path:
    """
    Locate the mods folder for a game version.
    
    Args:
        data_dir: The game's data directory
        version: Game version as returned by game_version()
    
    Returns:
        <data_dir>/<version>/mods
    
    Raises:
        DirNotFoundError: If data_dir or the mods folder does not exist.
            Launching the game once usually creates it.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DirNotFoundError(data_dir)
    
    path = data_dir / version / "mods"
    if not path.is_dir():
        raise DirNotFoundError(path)
    return path


def beammm_dir() -> Path:
    """
    BeamMM's own state directory, created if missing.
    
    Uses BEAMMM_HOME when set, otherwise <local data dir>/BeamMM.
    """
    override_path = os.environ.get(ENV_BEAMMM_HOME)
    if override_path:
        return _ensure_dir(Path(override_path))
    return _ensure_dir(_local_data_dir() / BEAMMM_DIR_NAME)


def presets_dir(beammm_home: Path) -> Path:
    """Presets directory inside the BeamMM state directory, created if missing."""
    return _ensure_dir(Path(beammm_home) / PRESETS_DIR_NAME)
