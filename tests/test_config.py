"""Tests for configuration loading and sandboxing."""

from pathlib import Path

from string_finder.config import FinderConfig, get_config_path, get_init_script_path, load_config


class TestFinderConfig:
    def test_defaults(self):
        c = FinderConfig()
        assert c.quote == '"'
        assert c.escape == "\\"
        assert c.encoding == "utf-8"
        assert c.null_separator is False
        assert c.highlight is False

    def test_separator(self):
        c = FinderConfig()
        assert c.separator == "\n"
        c.null_separator = True
        assert c.separator == "\0"

    def test_custom_settings(self):
        c = FinderConfig()
        c.set("my_key", "my_value")
        assert c.get("my_key") == "my_value"
        assert c.get("missing", "default") == "default"


class TestConfigPath:
    def test_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "string_finder"
        assert get_init_script_path() == tmp_path / "string_finder" / "init.py"

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert get_config_path() == Path.home() / ".config" / "string_finder"


class TestLoadConfig:
    def test_no_config_file(self, no_user_config):
        """When no init.py exists, should return defaults with no error."""
        config, error = load_config()
        assert error is None
        assert config.quote == '"'

    def test_valid_config(self, monkeypatch, tmp_config_dir):
        init_file = tmp_config_dir / "init.py"
        init_file.write_text(
            "config.quote = \"'\"\n"
            "config.escape = chr(94)\n"
            "config.null_separator = True\n"
        )
        monkeypatch.setattr("string_finder.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert error is None
        assert config.quote == "'"
        assert config.escape == "^"
        assert config.null_separator is True

    def test_sandbox_blocks_import(self, monkeypatch, tmp_path):
        """The sandbox should prevent __import__ calls."""
        init_file = tmp_path / "init.py"
        init_file.write_text("import os\n")
        monkeypatch.setattr("string_finder.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert error is not None
        assert "Error" in error

    def test_sandbox_blocks_open(self, monkeypatch, tmp_path):
        init_file = tmp_path / "init.py"
        init_file.write_text("f = open('/etc/passwd')\n")
        monkeypatch.setattr("string_finder.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert error is not None

    def test_sandbox_allows_basic_types(self, monkeypatch, tmp_path):
        init_file = tmp_path / "init.py"
        init_file.write_text('config.set("x", str(42))\n')
        monkeypatch.setattr("string_finder.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert error is None
        assert config.get("x") == "42"

    def test_error_keeps_earlier_assignments(self, monkeypatch, tmp_path):
        init_file = tmp_path / "init.py"
        init_file.write_text("config.quote = '`'\nundefined_name\n")
        monkeypatch.setattr("string_finder.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert "NameError" in error
        assert config.quote == "`"

    def test_syntax_error_in_config(self, monkeypatch, tmp_path):
        init_file = tmp_path / "init.py"
        init_file.write_text("def f(:\n")
        monkeypatch.setattr("string_finder.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert error is not None
        assert "SyntaxError" in error
