"""
Dash callbacks that keep control values in the page URL.

Each binding maps a query key to the id of a control whose ``value``
property is mirrored into the query string of a ``dcc.Location``. When the
control changes, the key is upserted and the new path+query is pushed to
the location's ``href``. Clearing a control, or pressing the optional
clear button, removes the key(s) instead.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from dash import Input, Output, State, ctx, no_update

from .codec import parse, remove_keys, upsert

logger = logging.getLogger(__name__)

# Apps that already have URL sync callbacks, keyed by id(app)
_registered_apps: Dict[int, Dict[str, Any]] = {}


def register_callbacks(app,
                       location_id: str,
                       bindings: Dict[str, str],
                       clear_button_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Register the URL sync callback with the Dash app.

    Args:
        app: The Dash application instance
        location_id: Id of the dcc.Location component to write to
        bindings: Mapping of query key to control component id
        clear_button_id: Optional id of a button that clears every bound key

    Returns:
        Registration details for the app
    """
    if not app:
        raise ValueError("Valid Dash app instance required for callback registration")
    if not bindings:
        raise ValueError("At least one query key binding is required")

    app_id = id(app)
    if app_id in _registered_apps:
        logger.info("URL sync callbacks already registered for this app instance")
        return _registered_apps[app_id]

    inputs = [Input(control_id, 'value') for control_id in bindings.values()]
    if clear_button_id:
        inputs.append(Input(clear_button_id, 'n_clicks'))

    @app.callback(
        Output(location_id, 'href'),
        inputs,
        State(location_id, 'search'),
        State(location_id, 'pathname'),
        prevent_initial_call=True
    )
    def update_url_from_controls(*args):
        search, pathname = args[-2], args[-1]
        return sync_url(ctx.triggered_id, search, pathname, bindings,
                        values=args[:len(bindings)], clear_button_id=clear_button_id)

    registration = {
        'location_id': location_id,
        'bindings': dict(bindings),
        'clear_button_id': clear_button_id,
    }
    _registered_apps[app_id] = registration
    logger.info(f"Registered URL sync for {len(bindings)} control(s) on '{location_id}'")
    return registration


def sync_url(triggered_id: Optional[str],
             search: Optional[str],
             pathname: Optional[str],
             bindings: Dict[str, str],
             values: Sequence[Any],
             clear_button_id: Optional[str] = None):
    """
    Compute the new href for a control change.

    Returns ``dash.no_update`` when the trigger is not one of the bound
    controls or the clear button, or when the control value is not a
    scalar (a multi-select dropdown, for instance).
    """
    path = pathname or ''

    if clear_button_id and triggered_id == clear_button_id:
        return remove_keys(search, list(bindings), path)

    for (key, control_id), value in zip(bindings.items(), values):
        if control_id != triggered_id:
            continue
        if _is_empty(value):
            return remove_keys(search, [key], path)
        if isinstance(value, (list, tuple, dict)):
            logger.warning(f"Control {control_id!r} produced a non-scalar value for query key {key!r}; URL left unchanged")
            return no_update
        return upsert(search, key, value, path)

    logger.debug(f"Ignoring URL sync trigger {triggered_id!r}")
    return no_update


def url_state_to_controls(search: Optional[str], bindings: Dict[str, str]) -> List[Optional[str]]:
    """Read initial control values from a search string, in binding order."""
    state = parse(search)
    return [state.get(key) for key in bindings]


def is_registered(app) -> bool:
    return id(app) in _registered_apps


def unregister_callbacks(app) -> None:
    """Forget the registration record for an app (mainly for tests)."""
    _registered_apps.pop(id(app), None)


def _is_empty(value: Any) -> bool:
    return value is None or value == '' or value == []
