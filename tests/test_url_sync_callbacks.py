"""
Tests for the Dash URL sync callbacks.

The href computation is tested directly; registration is tested against a
real Dash app instance.
"""

import logging
import os
import sys

import dash
import pytest
from dash import no_update

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from url_state.callbacks import (
    is_registered,
    register_callbacks,
    sync_url,
    unregister_callbacks,
    url_state_to_controls,
)

BINDINGS = {'color': 'color-input', 'type': 'type-select'}


class TestSyncUrl:
    """Test the href produced for control changes."""

    def test_control_change_upserts_key(self):
        href = sync_url('color-input', '?type=fill', '/transformations/add/recolor',
                        BINDINGS, values=['red', 'fill'])
        assert href == '/transformations/add/recolor?type=fill&color=red'

    def test_cleared_control_removes_key(self):
        href = sync_url('color-input', '?color=red&type=fill', '/p',
                        BINDINGS, values=['', 'fill'])
        assert href == '/p?type=fill'

    def test_none_value_removes_key(self):
        href = sync_url('type-select', '?color=red&type=fill', '/p',
                        BINDINGS, values=['red', None])
        assert href == '/p?color=red'

    def test_clear_button_removes_all_bound_keys(self):
        href = sync_url('clear-filters', '?color=red&type=fill&page=2', '/p',
                        BINDINGS, values=['red', 'fill'], clear_button_id='clear-filters')
        assert href == '/p?page=2'

    def test_unknown_trigger_is_no_update(self):
        assert sync_url('something-else', '?a=1', '/p', BINDINGS, values=['x', 'y']) is no_update
        assert sync_url(None, '?a=1', '/p', BINDINGS, values=['x', 'y']) is no_update

    def test_multi_select_value_leaves_url_unchanged(self, caplog):
        with caplog.at_level(logging.WARNING):
            href = sync_url('type-select', '?type=fill', '/p',
                            BINDINGS, values=['red', ['fill', 'recolor']])
        assert href is no_update
        assert "non-scalar value for query key 'type'" in caplog.text

    def test_empty_multi_select_removes_key(self):
        href = sync_url('type-select', '?color=red&type=fill', '/p',
                        BINDINGS, values=['red', []])
        assert href == '/p?color=red'

    def test_missing_pathname_gives_relative_href(self):
        assert sync_url('color-input', None, None, BINDINGS, values=['red', None]) == '?color=red'


class TestUrlStateToControls:

    def test_reads_values_in_binding_order(self):
        assert url_state_to_controls('?type=fill&color=red', BINDINGS) == ['red', 'fill']

    def test_missing_keys_are_none(self):
        assert url_state_to_controls('?color=red', BINDINGS) == ['red', None]
        assert url_state_to_controls(None, BINDINGS) == [None, None]


class TestRegistration:
    """Test callback registration on a Dash app."""

    def setup_method(self):
        self.app = dash.Dash(__name__)
        unregister_callbacks(self.app)

    def teardown_method(self):
        unregister_callbacks(self.app)

    def test_register_adds_href_callback(self):
        registration = register_callbacks(self.app, 'url', BINDINGS, clear_button_id='clear')

        assert is_registered(self.app)
        assert registration['location_id'] == 'url'
        assert registration['bindings'] == BINDINGS
        assert any('url.href' in key for key in self.app.callback_map)

    def test_duplicate_registration_is_prevented(self):
        first = register_callbacks(self.app, 'url', BINDINGS)
        callbacks_after_first = len(self.app.callback_map)

        second = register_callbacks(self.app, 'url', BINDINGS)

        assert second == first
        assert len(self.app.callback_map) == callbacks_after_first

    def test_invalid_app_parameter(self):
        with pytest.raises(ValueError, match="Valid Dash app instance required"):
            register_callbacks(None, 'url', BINDINGS)

    def test_bindings_required(self):
        with pytest.raises(ValueError, match="binding"):
            register_callbacks(self.app, 'url', {})

    def test_unregister(self):
        register_callbacks(self.app, 'url', BINDINGS)
        unregister_callbacks(self.app)
        assert not is_registered(self.app)
