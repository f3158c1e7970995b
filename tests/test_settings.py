# tests/test_settings.py
"""
Settings Tests - Unit Tests for Environment Configuration

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- stayrate.config.settings (Settings for testing)
- pydantic (ValidationError)
- pytest (testing framework, monkeypatch fixture)
"""
import pytest  # Testing framework for writing and running tests

from pydantic import ValidationError  # Raised on invalid settings values

from stayrate.config.settings import Settings

ENV_VARS = (
    "STAYRATE_CURRENCY",
    "STAYRATE_DISPLAY_DECIMALS",
    "STAYRATE_LOG_LEVEL",
    "STAYRATE_LOG_STDOUT",
    "LOG_FILE",
    "LOG_DIR",
    "LOG_MAX_BYTES",
    "LOG_BACKUP_COUNT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.default_currency == "AED"
        assert settings.display_decimals == 2
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.log_stdout is True

    def test_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("STAYRATE_CURRENCY", " gbp ")
        monkeypatch.setenv("STAYRATE_DISPLAY_DECIMALS", "3")
        monkeypatch.setenv("STAYRATE_LOG_LEVEL", "debug")
        monkeypatch.setenv("STAYRATE_LOG_STDOUT", "false")
        monkeypatch.setenv("LOG_DIR", "/tmp/stayrate-logs")

        settings = Settings(_env_file=None)

        assert settings.default_currency == "GBP"
        assert settings.display_decimals == 3
        assert settings.log_level == "DEBUG"
        assert settings.log_stdout is False
        assert settings.log_dir == "/tmp/stayrate-logs"

    @pytest.mark.parametrize("name,value", [
        ("STAYRATE_CURRENCY", "dirham"),
        ("STAYRATE_DISPLAY_DECIMALS", "9"),
        ("STAYRATE_LOG_LEVEL", "verbose"),
        ("LOG_MAX_BYTES", "10"),
    ])
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
