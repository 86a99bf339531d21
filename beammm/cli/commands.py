"""
CLI command implementations.

Every command works on a Workspace: the game's mod registry plus the
preset store. Commands mutate the in-memory state; finish() reconciles
presets and writes the registry back, so the game always sees the union
of enabled presets after any command.

Destructive bulk actions ask for confirmation unless assume_yes is set.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from ..discovery import beamng_dir, beammm_dir, game_version, mods_dir, presets_dir
from ..mods import ModRegistry, ModRegistryStore
from ..presets import PresetNotFoundError, PresetStore, PresetsFailedError, apply_presets
from .errors import ConfirmationDenied, ValidationError

logger = logging.getLogger(__name__)

ALL_MODS = "all"


@dataclass
class Workspace:
    """Loaded state a command operates on."""
    
    registry_store: ModRegistryStore
    registry: ModRegistry
    preset_store: PresetStore
    assume_yes: bool = False


def open_workspace(data_dir: Optional[Path] = None, assume_yes: bool = False) -> Workspace:
    """
    Locate the game and BeamMM directories and load the registry.
    
    Args:
        data_dir: Optional custom BeamNG.drive data directory
        assume_yes: Answer yes to every confirmation prompt
        
    Raises:
        DiscoveryError: If the game, its version or mods folder cannot be found
        PersistenceError: If db.json cannot be loaded
    """
    game_dir = beamng_dir(data_dir)
    version = game_version(game_dir)
    registry_store = ModRegistryStore(mods_dir(game_dir, version))
    logger.debug(f"Using BeamNG.drive {version} at {game_dir}")
    
    return Workspace(
        registry_store=registry_store,
        registry=registry_store.load(),
        preset_store=PresetStore(presets_dir(beammm_dir())),
        assume_yes=assume_yes,
    )


def confirm(
    message: str,
    default: bool = False,
    assume_yes: bool = False,
    reader: Optional[TextIO] = None,
    writer: Optional[TextIO] = None,
) -> bool:
    """
    Ask the user a yes/no question.
    
    With default yes anything but "n" confirms; with default no only "y"
    confirms. End of input counts as an empty answer.
    
    Args:
        message: Question to display
        default: Answer assumed for empty input
        assume_yes: Skip the prompt and confirm
        reader: Stream the answer is read from (stdin when omitted)
        writer: Stream the question is written to (stdout when omitted)
    """
    if assume_yes:
        return True
    
    reader = reader if reader is not None else sys.stdin
    writer = writer if writer is not None else sys.stdout
    
    choices = "(Y/n)" if default else "(y/N)"
    writer.write(f"{message.strip()} {choices} ")
    writer.flush()
    answer = reader.readline().strip().lower()
    
    if default:
        return answer != "n"
    return answer == "y"


def _is_all_keyword(mod_id: str) -> bool:
    return mod_id.lower() == ALL_MODS


def _require_mods(mods: Sequence[str], allow_all: bool = False) -> List[str]:
    """
    Check a mod selection from the command line.
    
    "all" must stand alone, and only where the command supports it.
    """
    mods = list(mods)
    if not mods:
        raise ValidationError("No mods given")
    
    keywords = [mod_id for mod_id in mods if _is_all_keyword(mod_id)]
    if keywords and not allow_all:
        raise ValidationError(f"'{keywords[0]}' is not a mod ID here", argument=keywords[0])
    if keywords and len(mods) > 1:
        raise ValidationError(
            f"'{keywords[0]}' cannot be combined with mod IDs",
            argument=keywords[0],
        )
    return mods


def _is_all(mods: Sequence[str]) -> bool:
    return len(mods) == 1 and _is_all_keyword(mods[0])


# ============================================================================
# MOD COMMANDS
# ============================================================================

def list_mods(workspace: Workspace) -> None:
    """Print every installed mod with its activation state."""
    registry = workspace.registry
    for mod_id in sorted(registry.get_mods()):
        status = "enabled " if registry.is_mod_active(mod_id) else "disabled"
        print(f"{status} {mod_id}")


def set_mods(workspace: Workspace, mods: Sequence[str], active: bool) -> None:
    """
    Enable or disable mods. Passing "all" acts on every installed mod.
    
    Raises:
        ValidationError: If no mods are given or "all" is mixed with mod IDs
        MissingModsError: If any named mod is not installed (nothing changes)
        ConfirmationDenied: If the user declines the "all" prompt
    """
    mods = _require_mods(mods, allow_all=True)
    verb = "enable" if active else "disable"
    
    if _is_all(mods):
        question = f"Are you sure you would like to {verb} all mods?"
        # Enabling everything is the safe default; disabling everything is not
        if not confirm(question, default=active, assume_yes=workspace.assume_yes):
            raise ConfirmationDenied(question)
        workspace.registry.set_all_mods_active(active)
        print(f"✓ All mods {verb}d")
        return
    
    workspace.registry.set_mods_active(mods, active)
    for mod_id in mods:
        print(f"✓ {mod_id} {verb}d")


# ============================================================================
# PRESET COMMANDS
# ============================================================================

def list_presets(workspace: Workspace) -> None:
    """Print every stored preset with its enabled state."""
    for preset in workspace.preset_store.iter_presets():
        status = "enabled " if preset.enabled else "disabled"
        print(f"{status} {preset.name}")


def create_preset(workspace: Workspace, name: str, mods: Sequence[str]) -> None:
    """
    Create a new, disabled preset.
    
    Raises:
        PresetExistsError: If the name is already taken
        InvalidPresetError: If the name is not usable
    """
    preset = workspace.preset_store.create(name, mods)
    
    print(f"✓ Preset '{name}' created")
    if preset.mods:
        print("With mods:")
        for mod_id in preset.mods:
            print(f"  - {mod_id}")
    else:
        print("No mods added to the preset.")
    print("Use enable-preset / disable-preset to toggle it.")
    print("Use preset-add / preset-remove to change its mods.")


def delete_preset(workspace: Workspace, name: str) -> None:
    """
    Permanently delete a preset. Mod activation is not changed.
    
    Raises:
        PresetNotFoundError: If the preset does not exist
        ConfirmationDenied: If the user declines
    """
    if not workspace.preset_store.exists(name):
        raise PresetNotFoundError(name)
    
    question = f"Are you sure you want to delete preset '{name}'?"
    if not confirm(question, default=False, assume_yes=workspace.assume_yes):
        raise ConfirmationDenied(question)
    
    workspace.preset_store.delete(name)
    print(f"✓ Preset '{name}' deleted")


def add_to_preset(workspace: Workspace, name: str, mods: Sequence[str]) -> None:
    """Append mods to a stored preset."""
    mods = _require_mods(mods)
    preset = workspace.preset_store.load(name)
    preset.add_mods(mods)
    workspace.preset_store.save(preset)
    print(f"✓ Added {len(mods)} mod(s) to preset '{name}'")


def remove_from_preset(workspace: Workspace, name: str, mods: Sequence[str]) -> None:
    """Remove mods from a stored preset. Mods not in the preset are ignored."""
    mods = _require_mods(mods)
    preset = workspace.preset_store.load(name)
    preset.remove_mods(mods)
    workspace.preset_store.save(preset)
    print(f"✓ Removed {len(mods)} mod(s) from preset '{name}'")


def enable_preset(workspace: Workspace, name: str) -> None:
    """Mark a preset enabled. Its mods are activated by finish()."""
    preset = workspace.preset_store.load(name)
    preset.enable()
    workspace.preset_store.save(preset)
    print(f"✓ Preset '{name}' enabled")


def disable_preset(workspace: Workspace, name: str) -> None:
    """
    Disable a preset and deactivate its mods.
    
    Mods shared with other enabled presets are switched back on by finish().
    
    Raises:
        MissingModsError: If the preset names uninstalled mods (nothing changes)
    """
    preset = workspace.preset_store.load(name)
    preset.disable(workspace.registry)
    workspace.preset_store.save(preset)
    print(f"✓ Preset '{name}' disabled")


# ============================================================================
# RECONCILIATION
# ============================================================================

def sync_presets(registry: ModRegistry, preset_store: PresetStore) -> List[str]:
    """
    Apply every stored preset, force-disabling the ones that fail.
    
    Presets that reference missing mods are reported, force-disabled
    and saved so their stored flag matches what was applied.
    
    Returns:
        Names of presets that were force-disabled, sorted
    """
    try:
        apply_presets(preset_store.iter_presets(), registry)
    except PresetsFailedError as e:
        failed = sorted(e.presets)
        print("✗ Failed to apply presets:", file=sys.stderr)
        for name in failed:
            print(f"  - {name}", file=sys.stderr)
        print("Because of the following missing mods:", file=sys.stderr)
        for mod_id in sorted(e.mods):
            print(f"  - {mod_id}", file=sys.stderr)
        print("Disabling these presets.", file=sys.stderr)
        
        for name in failed:
            preset = preset_store.load(name)
            preset.force_disable(registry)
            preset_store.save(preset)
        return failed
    
    return []


def finish(workspace: Workspace) -> List[str]:
    """
    Reconcile presets and save the registry.
    
    Returns:
        Names of presets that had to be force-disabled
    """
    failed = sync_presets(workspace.registry, workspace.preset_store)
    workspace.registry_store.save(workspace.registry)
    return failed
