"""Unit tests for config.py"""

import pytest

from mdprep.config import load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no stray config.yaml is read."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.log_level == "WARNING"
    assert settings.json_indent == 2
    assert settings.strip_liquid_tags is True
    assert settings.fail_on_warning is False


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("json_indent: 4\nfail_on_warning: true\n")
    settings = load_config()
    assert settings.json_indent == 4
    assert settings.fail_on_warning is True


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDPREP_JSON_INDENT takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("json_indent: 4\n")
    monkeypatch.setenv("MDPREP_JSON_INDENT", "0")
    assert load_config().json_indent == 0


def test_load_config_env_bool(monkeypatch):
    """Boolean env vars are coerced by the settings model."""
    monkeypatch.setenv("MDPREP_STRIP_LIQUID_TAGS", "false")
    assert load_config().strip_liquid_tags is False


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("MDPREP_LOG_LEVEL", "INFO")
    assert load_config(overrides={"log_level": "DEBUG"}).log_level == "DEBUG"
    assert load_config(overrides={"log_level": None}).log_level == "INFO"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_rejects_bad_log_level(monkeypatch):
    """Out-of-range values fail settings validation."""
    from pydantic import ValidationError
    monkeypatch.setenv("MDPREP_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        load_config()


def test_load_config_overrides_optional():
    """overrides may be omitted or passed as None."""
    assert load_config(None) == load_config()
