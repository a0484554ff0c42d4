import pytest

from unixproc.config import ConfigurationError, ProcessControlSettings, get_settings, reset_settings, runtime
from unixproc.config.settings import DEFAULT_PROBE_CLEANUP_TIMEOUT_SECONDS


@pytest.fixture(autouse=True)
def no_default_files(monkeypatch, tmp_path):
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (tmp_path / "missing.env",))
    monkeypatch.setattr(runtime, "_JSON_ENV_CANDIDATES", (tmp_path / "missing.json",))


def test_defaults():
    settings = ProcessControlSettings()

    assert settings.probe_cleanup_timeout_seconds == DEFAULT_PROBE_CLEANUP_TIMEOUT_SECONDS
    assert settings.console_quiet is False
    assert settings.log_append is False
    assert settings.log_directory is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PROCESS_PROBE_CLEANUP_TIMEOUT_SECONDS", "3")
    monkeypatch.setenv("PROCESS_CONSOLE_QUIET", "yes")
    monkeypatch.setenv("PROCESS_LOG_APPEND", "1")
    monkeypatch.setenv("PROCESS_LOG_DIRECTORY", "/tmp/proc-logs")

    settings = ProcessControlSettings()

    assert settings.probe_cleanup_timeout_seconds == 3.0
    assert settings.console_quiet is True
    assert settings.log_append is True
    assert settings.log_directory == "/tmp/proc-logs"


def test_invalid_value_raises(monkeypatch):
    monkeypatch.setenv("PROCESS_PROBE_CLEANUP_TIMEOUT_SECONDS", "-2")
    with pytest.raises(ConfigurationError):
        ProcessControlSettings()


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("PROCESS_CONSOLE_QUIET", "true")

    assert get_settings() is first
    assert first.console_quiet is False

    reset_settings()
    assert get_settings().console_quiet is True
