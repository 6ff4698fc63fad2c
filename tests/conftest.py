"""Shared fixtures for string_finder tests."""

import pytest


@pytest.fixture
def no_user_config(monkeypatch, tmp_path):
    """Point config loading at an init.py that does not exist."""
    init_path = tmp_path / "config" / "string_finder" / "init.py"
    monkeypatch.setattr("string_finder.config.get_init_script_path", lambda: init_path)
    return init_path


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Provide a temporary config directory."""
    config_dir = tmp_path / "config" / "string_finder"
    config_dir.mkdir(parents=True)
    return config_dir
