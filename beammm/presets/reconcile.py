"""
Preset reconciliation.

Folds every enabled preset into the mod registry. The pass is additive:
it only ever switches mods on, so the result is the union of all enabled
presets' mods regardless of the order presets are visited in.
"""

import logging
from typing import Iterable, Set

from ..mods import MissingModsError, ModRegistry
from .errors import PresetsFailedError
from .models import Preset

logger = logging.getLogger(__name__)


def apply_presets(presets: Iterable[Preset], registry: ModRegistry) -> None:
    """
    Activate the mods of every enabled preset.
    
    Each preset is applied as one all-or-nothing batch. A preset that
    names unknown mods is skipped and reported; it does not stop other
    presets from being applied.
    
    Mods not named by any enabled preset are left as they are.
    
    Args:
        presets: Presets to reconcile (typically every stored preset)
        registry: Registry to update
        
    Raises:
        PresetsFailedError: If any enabled preset referenced missing mods.
            Carries all missing mod IDs and failed preset names. Callers
            are expected to force_disable() the failed presets.
        Any error raised while iterating presets propagates unchanged.
    """
    missing_mods: Set[str] = set()
    failed_presets: Set[str] = set()
    applied = 0
    
    for preset in presets:
        if not preset.enabled:
            continue
        
        try:
            registry.set_mods_active(preset.mods, True)
        except MissingModsError as e:
            missing_mods.update(e.mods)
            failed_presets.add(preset.name)
            logger.debug(f"Preset '{preset.name}' not applied, missing: {', '.join(e.mods)}")
            continue
        
        applied += 1
    
    logger.info(f"Applied {applied} enabled preset(s), {len(failed_presets)} failed")
    
    if failed_presets:
        raise PresetsFailedError(mods=missing_mods, presets=failed_presets)
