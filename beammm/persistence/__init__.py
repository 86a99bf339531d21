"""
Persistence layer for BeamMM state.

JSON files only: the game's db.json and one file per preset.
"""

from .errors import PersistenceError, LoadError, SaveError
from .files import read_json, write_json_atomic

__all__ = [
    "PersistenceError",
    "LoadError",
    "SaveError",
    "read_json",
    "write_json_atomic",
]
