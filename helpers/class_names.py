"""
Class name merging for Tailwind-styled components.

``cn`` accepts the same loose inputs as clsx (strings, nested iterables and
``{class_name: condition}`` mappings), then hands the joined string to
tailwind-merge so that a later class replaces an earlier one setting the
same property under the same variant.
"""

from typing import Any, Iterator, Mapping

from tailwind_merge import TailwindMerge

_tailwind = TailwindMerge()


def cn(*inputs: Any) -> str:
    """
    Merge class names into a single class string.

    Example:
        >>> cn('px-2 py-1 text-sm', {'text-lg': True, 'hidden': False})
        'px-2 py-1 text-lg'
    """
    return _tailwind.merge(clsx(*inputs))


def clsx(*inputs: Any) -> str:
    """Join truthy class names without conflict resolution."""
    return ' '.join(_flatten(inputs))


def _flatten(inputs: Any) -> Iterator[str]:
    for item in inputs:
        if item is None or isinstance(item, bool) or item == '' or item == 0:
            continue
        if isinstance(item, str):
            yield from item.split()
        elif isinstance(item, Mapping):
            for class_name, condition in item.items():
                if condition:
                    yield from str(class_name).split()
        elif isinstance(item, (int, float)):
            yield str(item)
        else:
            yield from _flatten(item)
