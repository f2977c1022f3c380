import os
import sys
from pathlib import Path

import pytest
import toml

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import Config, ImageConfig
from core.exceptions import ConfigurationError
import config_manager


@pytest.fixture
def config_path(tmp_path):
    """Path to a config file inside the test's temporary directory."""
    return tmp_path / "test_config.toml"


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Make sure each test starts without a cached global config."""
    monkeypatch.setattr(config_manager, "_config_instance", None)
    yield


# --- Test Cases for Config.load_config() ---

def test_missing_file_is_created_with_defaults(config_path):
    config = Config(config_file_path=str(config_path))

    assert config_path.exists()
    saved = toml.load(config_path)
    assert saved['images']['default_dimension'] == 1000
    assert saved['download']['file_extension'] == 'png'
    assert saved['logging']['level'] == 'INFO'
    # Optional values are not written as TOML has no null
    assert 'log_file' not in saved['logging']
    assert config.validate() == []


def test_load_config_exists_and_valid(config_path):
    custom_values = {
        'images': {
            'default_dimension': 800,
            'default_aspect_ratio': '4:5',
            'aspect_ratios': {'4:5': {'width': 800, 'height': 1000}},
        },
        'download': {'timeout_seconds': 5.0, 'file_extension': 'jpg'},
        'debounce': {'delay_seconds': 0.5},
        'logging': {'level': 'DEBUG', 'log_file': 'studio.log'},
    }
    with open(config_path, 'w') as f:
        toml.dump(custom_values, f)

    config = Config(config_file_path=str(config_path))

    assert config.images.default_dimension == 800
    assert config.images.default_aspect_ratio == '4:5'
    assert config.images.aspect_ratios == {'4:5': {'width': 800, 'height': 1000}}
    assert config.download.timeout_seconds == 5.0
    assert config.download.file_extension == 'jpg'
    assert config.debounce.delay_seconds == 0.5
    assert config.log_settings.level == 'DEBUG'
    assert config.log_settings.log_file == 'studio.log'
    assert config.validate() == []


def test_load_config_partial_keeps_defaults(config_path):
    config_path.write_text("[download]\ntimeout_seconds = 12.5\n")

    config = Config(config_file_path=str(config_path))

    assert config.download.timeout_seconds == 12.5
    assert config.download.file_extension == 'png'
    assert config.images.aspect_ratios['9:16'] == {'width': 1000, 'height': 1778}


def test_load_config_invalid_toml(config_path):
    config_path.write_text("this is not [valid toml")

    with pytest.raises(ConfigurationError) as exc_info:
        Config(config_file_path=str(config_path))

    assert str(config_path) in str(exc_info.value)


def test_save_and_reload_round_trip(config_path):
    config = Config(config_file_path=str(config_path))
    config.images.aspect_ratios['2:3'] = {'width': 1000, 'height': 1500}
    config.download.timeout_seconds = 3.0
    config.save_config()

    reloaded = Config(config_file_path=str(config_path))

    assert reloaded.images.aspect_ratios['2:3'] == {'width': 1000, 'height': 1500}
    assert reloaded.images.aspect_ratios['1:1'] == {'width': 1000, 'height': 1000}
    assert reloaded.download.timeout_seconds == 3.0


def test_save_config_unwritable_path(tmp_path):
    config = Config(config_file_path=str(tmp_path / "config.toml"))
    config.config_file_path = str(tmp_path / "missing_dir" / "config.toml")

    with pytest.raises(ConfigurationError, match="Error saving configuration"):
        config.save_config()


# --- Test Cases for validation ---

def test_validate_reports_section_errors(config_path):
    config = Config(config_file_path=str(config_path))
    config.images.default_dimension = 0
    config.images.default_aspect_ratio = '5:7'
    config.download.timeout_seconds = -1
    config.debounce.delay_seconds = -0.1
    config.log_settings.level = 'LOUD'

    errors = config.validate()

    assert "default_dimension must be positive" in errors
    assert any(error.startswith("default_aspect_ratio must be one of") for error in errors)
    assert "timeout_seconds must be positive" in errors
    assert "delay_seconds cannot be negative" in errors
    assert any(error.startswith("level must be one of") for error in errors)


def test_image_config_rejects_bad_preset():
    image_config = ImageConfig(aspect_ratios={'1:1': {'width': 1000, 'height': 0}})
    assert image_config.validate() == ["aspect_ratios.1:1.height must be positive"]


# --- Test Cases for config_manager ---

def test_get_config_is_cached(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    first = config_manager.get_config()
    second = config_manager.get_config()

    assert first is second
    assert Path(tmp_path / "config.toml").exists()


def test_refresh_config_reloads(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = config_manager.get_config()

    (tmp_path / "config.toml").write_text("[debounce]\ndelay_seconds = 1.0\n")
    refreshed = config_manager.refresh_config()

    assert refreshed is not first
    assert refreshed.debounce.delay_seconds == 1.0
