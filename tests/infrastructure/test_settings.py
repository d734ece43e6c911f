"""Tests for infrastructure settings."""

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DrawerSettings


def _no_dotenv(monkeypatch) -> None:
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)


def test_from_env_defaults_to_sqlite_under_data(monkeypatch, tmp_path):
    """Without overrides the store should live in data/shift_close.db."""
    _no_dotenv(monkeypatch)
    monkeypatch.delenv("SHIFT_CLOSE_STORE_BACKEND", raising=False)
    monkeypatch.delenv("SHIFT_CLOSE_DB_URL", raising=False)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = DrawerSettings.from_env()

    assert settings.store_backend == "sqlalchemy"
    assert settings.db_url == (
        f"sqlite:///{(tmp_path / 'data' / 'shift_close.db').as_posix()}"
    )
    assert (tmp_path / "data").is_dir()


def test_from_env_reads_overrides(monkeypatch):
    _no_dotenv(monkeypatch)
    monkeypatch.setenv("SHIFT_CLOSE_STORE_BACKEND", "  Memory ")
    monkeypatch.setenv("SHIFT_CLOSE_DB_URL", "postgresql://user@host/drawer")

    settings = DrawerSettings.from_env()

    assert settings.store_backend == "memory"
    assert settings.db_url == "postgresql://user@host/drawer"


def test_from_env_warns_on_unknown_backend(monkeypatch):
    _no_dotenv(monkeypatch)
    warnings = []

    class _Logger:
        def warning(self, message):
            warnings.append(message)

    monkeypatch.setattr(settings_module, "get_app_logger", lambda: _Logger())
    monkeypatch.setenv("SHIFT_CLOSE_STORE_BACKEND", "redis")
    monkeypatch.setenv("SHIFT_CLOSE_DB_URL", "sqlite://")

    settings = DrawerSettings.from_env()

    assert settings.store_backend == "redis"
    assert warnings and "redis" in warnings[0]
