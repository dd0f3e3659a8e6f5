# itemboard/config.py
"""
Settings read from environment variables, with defaults that work for a
local checkout. Values are read when ``Settings()`` is instantiated, so set
the environment before calling ``create_app``.
"""

import os
from dataclasses import dataclass, field

from itemboard.db.engine import DB_URL


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Item Board API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "0.1.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", DB_URL))
    sql_echo: bool = field(default_factory=lambda: _env_flag("SQL_ECHO"))

    # where the terminal client finds the service
    api_base: str = field(
        default_factory=lambda: os.getenv("ITEMBOARD_API_BASE", "http://localhost:8000")
    )
