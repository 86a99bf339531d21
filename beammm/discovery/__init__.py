"""
Game and state directory discovery for BeamMM.
"""

from .errors import DiscoveryError, DirNotFoundError, GameDirNotFoundError, VersionError
from .paths import (
    ENV_BEAMNG_DIR,
    ENV_BEAMMM_HOME,
    beamng_dir,
    game_version,
    mods_dir,
    beammm_dir,
    presets_dir,
)

__all__ = [
    "DiscoveryError",
    "DirNotFoundError",
    "GameDirNotFoundError",
    "VersionError",
    "ENV_BEAMNG_DIR",
    "ENV_BEAMMM_HOME",
    "beamng_dir",
    "game_version",
    "mods_dir",
    "beammm_dir",
    "presets_dir",
]
