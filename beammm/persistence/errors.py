"""
Persistence-specific errors.
"""


class PersistenceError(Exception):
    """Base exception for persistence operations."""
    
    pass


class LoadError(PersistenceError):
    """Failed to load state from storage."""
    
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class SaveError(PersistenceError):
    """Failed to save state to storage."""
    
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save {path}: {reason}")
