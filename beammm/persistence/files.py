"""
JSON file helpers shared by the registry and preset stores.

Explicit read/write only. No caching, no auto-persistence.
Writes go through a temp file so a crash never leaves a half-written file.
"""

import json
import logging
from pathlib import Path
from typing import Any

from .errors import LoadError, SaveError

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"


def read_json(path: Path) -> Any:
    """
    Read and parse a JSON file.
    
    Args:
        path: File to read
        
    Returns:
        The decoded JSON document
        
    Raises:
        LoadError: If the file cannot be read or is not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise LoadError(path, "file does not exist") from e
    except json.JSONDecodeError as e:
        raise LoadError(path, f"invalid JSON: {e}") from e
    except OSError as e:
        raise LoadError(path, str(e)) from e


def write_json_atomic(path: Path, data: Any) -> None:
    """
    Write a JSON document atomically.
    
    The document is written to a sibling temp file which then replaces
    the target, so readers see either the old or the new content.
    
    Args:
        path: Destination file
        data: JSON-serialisable document
        
    Raises:
        SaveError: If the file cannot be written
    """
    temp_path = path.with_name(path.name + TEMP_SUFFIX)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        temp_path.replace(path)
    except (OSError, TypeError, ValueError) as e:
        temp_path.unlink(missing_ok=True)
        raise SaveError(path, str(e)) from e
    logger.debug(f"Wrote {path}")
