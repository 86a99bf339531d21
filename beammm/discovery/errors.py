"""
Discovery-specific errors.

Exception hierarchy for locating the game's data directories and version.
"""

from pathlib import Path


class DiscoveryError(Exception):
    """
    Base exception for all discovery errors.
    
    Raised when BeamMM cannot work out where the game or its own
    state lives. Nothing has been modified when these are raised.
    """
    pass


class DirNotFoundError(DiscoveryError):
    """Raised when a required directory does not exist."""
    
    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Directory not found: {self.path}")


class GameDirNotFoundError(DiscoveryError):
    """
    Raised when the BeamNG.drive data directory cannot be found automatically.
    
    Launching the game once usually creates it.
    """
    pass


class VersionError(DiscoveryError):
    """Raised when the game version cannot be determined."""
    pass
