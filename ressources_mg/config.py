"""
Configuration
=============
Environment-driven settings for the API, the services and the scripts.

Values are read on every call to get_config() so tests and scripts can
change the environment without reloading modules. A ``.env`` file at the
project root is loaded once at import.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

project_root = Path(__file__).parent.parent
load_dotenv(project_root / ".env")

# Only used outside production
DEV_WEBMASTER_SECRET = "ressources-mg-development-secret-change-in-production"

DEFAULT_CORS_ORIGINS = "http://localhost,http://localhost:3000,http://localhost:5173"
DEFAULT_SITE_BASE_URL = "https://ressourcesmg.vercel.app"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    """Snapshot of the runtime configuration."""
    data_dir: Path
    app_env: str = "development"
    webmaster_password: Optional[str] = None
    webmaster_secret: Optional[str] = None    # None in production when unset
    token_expire_hours: int = 8
    cors_origins: List[str] = field(default_factory=list)
    site_base_url: str = DEFAULT_SITE_BASE_URL
    suggest_service_url: Optional[str] = None
    suggest_timeout_seconds: float = 15.0
    request_logging: bool = True
    api_port: int = 8000
    api_reload: bool = False

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    def db_path(self, filename: str) -> str:
        """Path of a SQLite file inside the data directory (created on demand)."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return str(self.data_dir / filename)


def get_config() -> AppConfig:
    """Build an AppConfig from the current environment."""
    app_env = os.getenv("APP_ENV", "development").strip().lower()

    secret = os.getenv("WEBMASTER_SECRET") or None
    if secret is None and app_env != "production":
        secret = DEV_WEBMASTER_SECRET

    cors = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")

    return AppConfig(
        data_dir=Path(os.getenv("DATA_DIR", "data")),
        app_env=app_env,
        webmaster_password=os.getenv("WEBMASTER_PASSWORD") or None,
        webmaster_secret=secret,
        token_expire_hours=int(os.getenv("TOKEN_EXPIRE_HOURS", "8")),
        cors_origins=[origin.strip() for origin in cors if origin.strip()],
        site_base_url=os.getenv("SITE_BASE_URL", DEFAULT_SITE_BASE_URL).rstrip("/"),
        suggest_service_url=os.getenv("SUGGEST_SERVICE_URL") or None,
        suggest_timeout_seconds=float(os.getenv("SUGGEST_TIMEOUT_SECONDS", "15")),
        request_logging=_env_bool("REQUEST_LOGGING", "true"),
        api_port=int(os.getenv("API_PORT", "8000")),
        api_reload=_env_bool("API_RELOAD", "false"),
    )
