import pytest

from course_api.core import config


def test_validate_runtime_config_rejects_sqlite_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'production')
    monkeypatch.setattr(config, 'DATABASE_URL', 'sqlite:///./fsjstd-restapi.db')

    with pytest.raises(RuntimeError):
        config.validate_runtime_config()


def test_validate_runtime_config_allows_server_database_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'Production')
    monkeypatch.setattr(config, 'DATABASE_URL', 'postgresql://courses:secret@db/courses')

    assert config.validate_runtime_config() is None


def test_validate_runtime_config_allows_sqlite_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'development')
    monkeypatch.setattr(config, 'DATABASE_URL', 'sqlite://')

    assert config.validate_runtime_config() is None
