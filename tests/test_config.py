"""Tests for configuration defaults, environment overrides and YAML files."""

import os

import pytest
import yaml

from termtip.core.config import APIConfig, GlossaryConfig, TermTipConfig

ENV_VARS = [
    "TERMTIP_GLOSSARY_FILES",
    "TERMTIP_NO_BUILTIN",
    "TERMTIP_API_HOST",
    "TERMTIP_API_PORT",
    "TERMTIP_MAX_TEXT_CHARS",
    "TERMTIP_LOG_LEVEL",
    "TERMTIP_DEBUG",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = TermTipConfig()
    assert config.glossary.include_builtin is True
    assert config.glossary.extra_files == []
    assert config.api.port == 5000
    assert config.api.max_text_chars == 100_000
    assert config.log_level == "INFO"
    assert config.debug is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TERMTIP_GLOSSARY_FILES", os.pathsep.join(["a.yaml", "b.json"]))
    monkeypatch.setenv("TERMTIP_NO_BUILTIN", "yes")
    monkeypatch.setenv("TERMTIP_API_HOST", "0.0.0.0")
    monkeypatch.setenv("TERMTIP_API_PORT", "8080")
    monkeypatch.setenv("TERMTIP_MAX_TEXT_CHARS", "500")
    monkeypatch.setenv("TERMTIP_LOG_LEVEL", "warning")

    config = TermTipConfig()

    assert config.glossary.extra_files == ["a.yaml", "b.json"]
    assert config.glossary.include_builtin is False
    assert config.api.host == "0.0.0.0"
    assert config.api.port == 8080
    assert config.api.max_text_chars == 500
    assert config.log_level == "WARNING"


def test_debug_env_forces_debug_logging(monkeypatch):
    monkeypatch.setenv("TERMTIP_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("TERMTIP_DEBUG", "1")
    config = TermTipConfig()
    assert config.debug is True
    assert config.log_level == "DEBUG"


def test_custom_sections():
    config = TermTipConfig(glossary=GlossaryConfig(include_builtin=False), api=APIConfig(port=9000))
    assert config.glossary.include_builtin is False
    assert config.api.port == 9000


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "termtip.yaml"
    config = TermTipConfig(
        glossary=GlossaryConfig(include_builtin=False, extra_files=["brands.yaml"]),
        api=APIConfig(host="0.0.0.0", port=8000, max_text_chars=10),
    )
    config.log_level = "WARNING"
    config.save_to_file(str(path))

    saved = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert saved["glossary"]["extra_files"] == ["brands.yaml"]

    loaded = TermTipConfig.load_from_file(str(path))
    assert loaded.glossary.include_builtin is False
    assert loaded.glossary.extra_files == ["brands.yaml"]
    assert loaded.api.port == 8000
    assert loaded.api.max_text_chars == 10
    assert loaded.log_level == "WARNING"


def test_load_rejects_unknown_section_keys(tmp_path):
    path = tmp_path / "termtip.yaml"
    path.write_text("api:\n  nonsense: 1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to load config"):
        TermTipConfig.load_from_file(str(path))


def test_load_missing_file(tmp_path):
    with pytest.raises(ValueError):
        TermTipConfig.load_from_file(str(tmp_path / "missing.yaml"))
