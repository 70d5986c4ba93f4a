import pytest

from mdbook_toc.core.config import Config, validate_config


def test_default_config_is_valid(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(Config, "PLUGINS", [])
    assert Config.validate() == []
    validate_config(Config())


def test_invalid_values_are_reported(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    monkeypatch.setattr(Config, "PLUGINS", ["table", "bogus"])

    errors = Config.validate()
    assert len(errors) == 2

    with pytest.raises(ValueError) as exc_info:
        validate_config(Config())
    assert "bogus" in str(exc_info.value)


def test_properties(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "debug")
    monkeypatch.setattr(Config, "PLUGINS", ["table"])
    config = Config()
    assert config.log_level == "DEBUG"
    assert config.plugins == ["table"]
