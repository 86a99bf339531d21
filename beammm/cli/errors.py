"""
Errors raised by BeamMM commands before any state is touched.

Mod and preset failures keep their own types (ModError, PresetError);
these cover bad command arguments and declined prompts.
"""

from typing import Optional


class CLIError(Exception):
    """Base exception for command-level failures."""
    pass


class ValidationError(CLIError):
    """
    Raised when a command's mod selection is unusable.
    
    Attributes:
        argument: The offending argument, when there is a single one
    """
    
    def __init__(self, message: str, argument: Optional[str] = None):
        self.message = message
        self.argument = argument
        super().__init__(message)


class ConfirmationDenied(CLIError):
    """Raised when the user answers no; the command leaves everything as it was."""
    
    def __init__(self, question: str = ""):
        self.question = question
        super().__init__("Cancelled, nothing was changed")
