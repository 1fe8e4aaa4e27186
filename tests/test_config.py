"""Tests for settings resolution."""

import pytest
import yaml

from modcheck.config import DEFAULT_MODEL, Settings, load_settings
from modcheck.errors import ConfigurationError


def test_defaults():
    settings = load_settings()
    assert settings.api_key == ""
    assert settings.model == DEFAULT_MODEL == "omni-moderation-latest"
    assert settings.content_path == "content.txt"
    assert settings.wait_threshold == 0.1
    assert settings.top_n == 3
    assert settings.log_level == "WARNING"


def test_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("MODCHECK_MODEL", "text-moderation-latest")
    monkeypatch.setenv("MODCHECK_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.api_key == "sk-test"
    assert settings.model == "text-moderation-latest"
    assert settings.log_level == "DEBUG"


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text('OPENAI_API_KEY="sk-from-dotenv"\n')
    assert load_settings().api_key == "sk-from-dotenv"


def test_yaml_file_and_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("MODCHECK_MODEL", "from-env")
    path = tmp_path / "modcheck.yaml"
    with open(path, "w") as f:
        yaml.dump({"model": "from-file", "wait_threshold": 0.25, "top_n": 5}, f)

    settings = load_settings(path)
    assert settings.model == "from-file"
    assert settings.wait_threshold == 0.25
    assert settings.top_n == 5

    settings = load_settings(path, model="from-cli", wait_threshold=None)
    assert settings.model == "from-cli"
    assert settings.wait_threshold == 0.25


def test_yaml_unknown_key(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("api_key: sk-nope\n")
    with pytest.raises(ConfigurationError, match="api_key"):
        load_settings(path)


def test_yaml_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n")
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_yaml_bad_value(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("top_n: many\n")
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "nope.yaml")


def test_unknown_override():
    with pytest.raises(ConfigurationError):
        load_settings(colour="blue")


def test_require_api_key():
    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        Settings().require_api_key()
    assert Settings(api_key="sk-1").require_api_key() == "sk-1"


def test_negative_top_n_rejected(tmp_path):
    path = tmp_path / "neg.yaml"
    path.write_text("top_n: -1\n")
    with pytest.raises(ConfigurationError, match="top_n"):
        load_settings(path)


def test_negative_threshold_rejected():
    with pytest.raises(ConfigurationError):
        load_settings(wait_threshold=-0.5)
