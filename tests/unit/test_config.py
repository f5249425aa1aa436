"""Unit tests for configuration loading."""

import pytest
from omegaconf.errors import ConfigKeyError

from scribe.config import CONFIG_PATH_ENV, ScribeConfig, load_config
from scribe.contexts.templating.defaults import DEFAULT_ACCENT, DEFAULT_DARK, DEFAULT_TEMPLATE


@pytest.mark.unit
def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)

    config = load_config()

    assert isinstance(config, ScribeConfig)
    assert config.default_template == DEFAULT_TEMPLATE
    assert config.default_accent == DEFAULT_ACCENT


@pytest.mark.unit
def test_file_overrides_defaults(tmp_path):
    config_file = tmp_path / "scribe.yaml"
    config_file.write_text('default_template: strak\ndefault_accent: "#7a3e9d"\ndrafts_dir: /tmp/drafts\n')

    config = load_config(config_file)

    assert config.default_template == "strak"
    assert config.default_accent == "#7a3e9d"
    assert config.default_dark == DEFAULT_DARK
    assert config.drafts_dir == "/tmp/drafts"


@pytest.mark.unit
def test_env_variable_points_to_file(tmp_path, monkeypatch):
    config_file = tmp_path / "scribe.yaml"
    config_file.write_text("output_dir: build/html\n")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))

    assert load_config().output_dir == "build/html"


@pytest.mark.unit
def test_env_variable_missing_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "missing.yaml"))

    assert load_config() == ScribeConfig()


@pytest.mark.unit
def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_unknown_key_rejected(tmp_path):
    config_file = tmp_path / "scribe.yaml"
    config_file.write_text("colour: red\n")

    with pytest.raises(ConfigKeyError):
        load_config(config_file)


@pytest.mark.unit
def test_to_render_defaults():
    defaults = ScribeConfig(default_template="klassiek", default_dark="#000000").to_render_defaults()

    assert defaults.template == "klassiek"
    assert defaults.dark == "#000000"
    assert defaults.accent == DEFAULT_ACCENT
