"""
Tests for the Dash application factory.
"""

import logging
import os
import sys

import dash
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import DEFAULT_URL_BINDINGS, create_app
from core.config import Config
from url_state.callbacks import is_registered, unregister_callbacks


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def config(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text('[logging]\nlevel = "WARNING"\n')
    return Config(config_file_path=str(config_file))


class TestCreateApp:

    def test_returns_dash_app_with_url_sync(self, config, restore_root_logger):
        app = create_app(config)
        try:
            assert isinstance(app, dash.Dash)
            assert is_registered(app)
            assert any('url.href' in key for key in app.callback_map)
        finally:
            unregister_callbacks(app)

    def test_layout_holds_location_and_bound_controls(self, config, restore_root_logger):
        app = create_app(config)
        try:
            layout = str(app.layout)
            assert "'url'" in layout
            for control_id in DEFAULT_URL_BINDINGS.values():
                assert control_id in layout
        finally:
            unregister_callbacks(app)

    def test_logging_follows_config(self, config, restore_root_logger):
        app = create_app(config)
        try:
            assert logging.getLogger().level == logging.WARNING
        finally:
            unregister_callbacks(app)
