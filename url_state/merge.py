"""
Deep merge for nested configuration objects.

``deep_merge`` is deliberately asymmetric: the first argument is the
primary object and wins every conflict, the second only fills gaps.
Swapping the arguments changes the result.
"""

from typing import Any, Dict, Mapping, Optional

ConfigObject = Dict[str, Any]


def deep_merge(primary: Mapping[str, Any], secondary: Optional[Mapping[str, Any]]) -> ConfigObject:
    """
    Merge ``secondary`` underneath ``primary``.

    Rules, applied at every nesting level:
      - a key only in ``secondary`` is carried through
      - a key in ``primary`` takes ``primary``'s value
      - unless both values are non-empty mappings, which are merged
        recursively under the same rules

    When ``secondary`` is None, ``primary`` is returned as is. Otherwise a
    new object is built and neither input is modified.

    Args:
        primary: Object whose values take precedence
        secondary: Object supplying values for keys ``primary`` lacks

    Returns:
        The merged configuration object

    Example:
        >>> deep_merge({'a': {'x': 1}}, {'a': {'x': 2, 'y': 9}, 'b': 3})
        {'a': {'x': 1, 'y': 9}, 'b': 3}
    """
    if secondary is None:
        return primary

    output = {key: _copy_nested(value) for key, value in secondary.items()}

    for key, value in primary.items():
        other = secondary.get(key)
        if _is_mergeable(value) and _is_mergeable(other):
            output[key] = deep_merge(value, other)
        else:
            output[key] = _copy_nested(value)

    return output


def _is_mergeable(value: Any) -> bool:
    # Empty mappings overwrite instead of merging
    return isinstance(value, Mapping) and bool(value)


def _copy_nested(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _copy_nested(item) for key, item in value.items()}
    return value
