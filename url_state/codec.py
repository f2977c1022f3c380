"""
Query-string state codec.

Translates between a flat key -> scalar mapping (the "query state") and a
URL query string. Parsing is permissive: fragments that cannot be decoded
into a key are dropped rather than reported. Writing applies a single
skip-null rule, so a key set to None disappears from the URL.

All functions are pure. The base path that prefixes a written query is
always passed in by the caller.
"""

import logging
import re
from typing import Dict, Iterable, Optional, Union
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

logger = logging.getLogger(__name__)

QueryValue = Union[str, int, float, bool, None]
QueryState = Dict[str, QueryValue]

_URL_WITH_SCHEME = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*://')


def parse(query_string: Optional[str]) -> QueryState:
    """
    Decode a query string into a query state.

    Accepts ``a=1&b=2``, ``?a=1&b=2``, an absolute path such as
    ``/transformations/42?a=1`` or a full URL. Only input starting with '/'
    or a scheme is treated as a path; anything else is query text, so a
    '?' inside it is part of a key or value. Bare keys decode to an empty
    string and the last occurrence of a repeated key wins.

    Args:
        query_string: Raw query string; None and '' give an empty state

    Returns:
        Ordered mapping of decoded keys to decoded string values
    """
    state: QueryState = {}
    if not query_string:
        return state

    for key, value in parse_qsl(_query_part(query_string), keep_blank_values=True, errors='replace'):
        if not key:
            logger.debug(f"Dropping query fragment without a key (value {value!r})")
            continue
        state[key] = value

    return state


def stringify(state: QueryState) -> str:
    """
    Encode a query state, skipping keys whose value is None.

    Keys and values are percent-encoded (space as %20) and written in the
    mapping's insertion order.
    """
    pairs = [(str(key), _format_value(value)) for key, value in state.items() if value is not None]
    return urlencode(pairs, quote_via=quote)


def upsert(query_string: Optional[str], key: str, value: QueryValue, path: str = '') -> str:
    """
    Set ``key`` to ``value`` in the query and return the new path+query.

    A None value removes the key. The result is ``path?query``, or just
    ``path`` when nothing is left in the query.

    Example:
        >>> upsert('color=red', 'type', 'fill', '/transformations/add/fill')
        '/transformations/add/fill?color=red&type=fill'
    """
    state = parse(query_string)
    state[key] = value
    return _join(path, stringify(state))


def remove_keys(query_string: Optional[str], keys_to_remove: Iterable[str], path: str = '') -> str:
    """
    Drop every key in ``keys_to_remove`` and return the new path+query.

    Keys that are not present are ignored, so repeated calls with the same
    keys give the same result.
    """
    state = parse(query_string)

    for key in keys_to_remove:
        state.pop(key, None)

    return _join(path, stringify(state))


def _query_part(query_string: str) -> str:
    if query_string.startswith('/') or _URL_WITH_SCHEME.match(query_string):
        return urlsplit(query_string).query

    query = query_string.split('#', 1)[0]
    return query[1:] if query.startswith('?') else query


def _format_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _join(path: str, query: str) -> str:
    return f"{path}?{query}" if query else path
