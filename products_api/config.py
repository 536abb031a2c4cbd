import os
from dataclasses import dataclass, field
from typing import Optional


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    _database = os.getenv("POSTGRES_DB")
    _user = os.getenv("POSTGRES_USER")
    _password = os.getenv("POSTGRES_PASSWORD")
    _host = os.getenv("POSTGRES_HOST")
    _port = os.getenv("POSTGRES_PORT", "5432")
    if _database and _user and _host:
        return f"postgresql://{_user}:{_password}@{_host}:{_port}/{_database}"

    return "sqlite:///./products.db"


DATABASE_URL = _database_url()
FRONTEND_URL = os.getenv("FRONTEND_URL")
GZIP_MINIMUM_SIZE = int(os.getenv("GZIP_MINIMUM_SIZE", "1000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

API_PREFIX = "/api/products"


@dataclass
class Settings:
    """Runtime settings handed to the application factory"""

    database_url: str = DATABASE_URL
    frontend_url: Optional[str] = FRONTEND_URL
    gzip_minimum_size: int = GZIP_MINIMUM_SIZE
    sql_echo: bool = SQL_ECHO
    engine_options: dict = field(default_factory=dict)

    @property
    def allowed_origins(self) -> list[str]:
        if self.frontend_url:
            return [self.frontend_url]
        return ["*"]
