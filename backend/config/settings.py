# backend/config/settings.py
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read from the environment (.env is loaded first)."""

    service_name: str = "thriftysouq-site-management"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    sql_echo: bool = False
    auto_create_tables: bool = True

    admin_email: str = ""
    admin_password: str = ""
    admin_session_ttl_minutes: int = 480
    admin_session_required: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        debug = _env_bool("DEBUG", False)
        return cls(
            debug=debug,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if debug else "INFO").strip().upper(),
            sql_echo=_env_bool("SQL_ECHO", False),
            auto_create_tables=_env_bool("AUTO_CREATE_TABLES", True),
            admin_email=os.getenv("ADMIN_EMAIL", "").strip(),
            admin_password=os.getenv("ADMIN_PASSWORD", ""),
            admin_session_ttl_minutes=int(os.getenv("ADMIN_SESSION_TTL_MINUTES", "480")),
            admin_session_required=_env_bool("ADMIN_SESSION_REQUIRED", True),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
