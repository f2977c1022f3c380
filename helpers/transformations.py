"""
Transformation parameter sets.

Each transformation type has a default parameter set understood by the
image provider. The effective config for a request is the defaults with the
user's overrides applied, layered over whatever config was stored for the
image before.
"""

import copy
import logging
from typing import Any, Dict, Mapping, Optional

from core.exceptions import ValidationError
from url_state.merge import ConfigObject, deep_merge

logger = logging.getLogger(__name__)

TRANSFORMATION_TYPES: Dict[str, Dict[str, Any]] = {
    'restore': {
        'title': 'Restore Image',
        'subtitle': 'Refine images by removing noise and imperfections',
        'config': {'restore': True},
    },
    'removeBackground': {
        'title': 'Background Remove',
        'subtitle': 'Removes the background of the image using AI',
        'config': {'removeBackground': True},
    },
    'fill': {
        'title': 'Generative Fill',
        'subtitle': "Enhance an image's dimensions using AI outpainting",
        'config': {'fillBackground': True},
    },
    'remove': {
        'title': 'Object Remove',
        'subtitle': 'Identify and eliminate objects from images',
        'config': {'remove': {'prompt': '', 'removeShadow': True, 'multiple': True}},
    },
    'recolor': {
        'title': 'Object Recolor',
        'subtitle': 'Identify and recolor objects from the image',
        'config': {'recolor': {'prompt': '', 'to': '', 'multiple': True}},
    },
}


def default_config(transformation_type: str) -> ConfigObject:
    """Return a fresh copy of the default parameters for a transformation type."""
    try:
        return copy.deepcopy(TRANSFORMATION_TYPES[transformation_type]['config'])
    except KeyError:
        raise ValidationError(
            f"Unknown transformation type. Expected one of {sorted(TRANSFORMATION_TYPES)}",
            field='transformation_type',
            value=transformation_type,
        ) from None


def prompt_overrides(transformation_type: str, prompt: str, color: Optional[str] = None) -> ConfigObject:
    """Build the overrides that carry the object prompt (and target color) for remove/recolor."""
    if transformation_type == 'remove':
        return {'remove': {'prompt': prompt}}
    if transformation_type == 'recolor':
        return {'recolor': {'prompt': prompt, 'to': color or ''}}
    return {}


def build_transformation_config(transformation_type: str,
                                overrides: Optional[Mapping[str, Any]] = None,
                                stored: Optional[Mapping[str, Any]] = None) -> ConfigObject:
    """
    Compute the effective transformation config.

    Args:
        transformation_type: One of TRANSFORMATION_TYPES
        overrides: Values chosen in the form; these win over the defaults
        stored: Config previously saved with the image; new values win over it

    Returns:
        The config to hand to the image provider
    """
    new_config = deep_merge(overrides or {}, default_config(transformation_type))
    effective = deep_merge(new_config, stored)
    logger.debug(f"Built {transformation_type} config: {effective}")
    return effective
