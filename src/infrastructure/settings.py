"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


SUPPORTED_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class DrawerSettings:
    """Settings for the drawer state store.

    Attributes:
        store_backend: Store identifier (sqlalchemy or memory).
        db_url: SQLAlchemy URL used by the sqlalchemy backend.
    """

    store_backend: str = "sqlalchemy"
    db_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "DrawerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            DrawerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = (
            os.getenv("SHIFT_CLOSE_STORE_BACKEND", "sqlalchemy")
            .strip()
            .lower()
        )
        if backend not in SUPPORTED_BACKENDS:
            get_app_logger().warning(
                f"Unknown SHIFT_CLOSE_STORE_BACKEND={backend!r}"
            )
        raw_url = os.getenv("SHIFT_CLOSE_DB_URL", "").strip()
        db_url = raw_url or cls._default_db_url()
        return cls(store_backend=backend, db_url=db_url)

    @staticmethod
    def _default_db_url() -> str:
        """Return a SQLite URL under the project data/ directory."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{(data_dir / 'shift_close.db').as_posix()}"


__all__ = ["DrawerSettings", "SUPPORTED_BACKENDS"]
