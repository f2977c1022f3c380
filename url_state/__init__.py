"""
URL state module for Image Transformation Studio.

Keeps filter and transformation UI state in the URL query string and
combines partial transformation configs with a precedence-aware deep merge.
"""

from .codec import QueryState, parse, remove_keys, stringify, upsert
from .merge import ConfigObject, deep_merge

__all__ = [
    # Query string codec
    'QueryState',
    'parse',
    'stringify',
    'upsert',
    'remove_keys',

    # Config merging
    'ConfigObject',
    'deep_merge',
]
