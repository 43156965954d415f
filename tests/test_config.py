from itemservice.config import Settings, get_settings
from itemservice.messages import DEFAULT_MESSAGES_FILE


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("TOTAL_PRICE_MIN", raising=False)

    settings = Settings(_env_file=None)

    assert settings.TOTAL_PRICE_MIN == 10_000
    assert settings.MESSAGES_FILE == str(DEFAULT_MESSAGES_FILE)
    assert settings.DEBUG is False


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TOTAL_PRICE_MIN", "5000")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.TOTAL_PRICE_MIN == 5_000
    assert settings.LOG_LEVEL == "debug"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
