"""
CLI control surface for BeamMM.

Commands operate on a loaded Workspace and leave persistence of the
registry to finish(), which also reconciles enabled presets.
"""

from .commands import (
    Workspace,
    open_workspace,
    confirm,
    list_mods,
    set_mods,
    list_presets,
    create_preset,
    delete_preset,
    add_to_preset,
    remove_from_preset,
    enable_preset,
    disable_preset,
    sync_presets,
    finish,
)
from .errors import CLIError, ValidationError, ConfirmationDenied

__all__ = [
    "Workspace",
    "open_workspace",
    "confirm",
    "list_mods",
    "set_mods",
    "list_presets",
    "create_preset",
    "delete_preset",
    "add_to_preset",
    "remove_from_preset",
    "enable_preset",
    "disable_preset",
    "sync_presets",
    "finish",
    "CLIError",
    "ValidationError",
    "ConfirmationDenied",
]
