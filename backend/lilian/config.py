"""Application settings read from the environment.

Values are loaded once at import time, after ``load_dotenv()`` has merged a
local ``.env`` file into the process environment.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str) -> List[str]:
    raw = os.getenv(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Runtime configuration for the API."""

    project_name: str = os.getenv("PROJECT_NAME", "Programa Lilian API")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./lilian.db")
    sql_echo: bool = _env_bool("SQL_ECHO")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Extra origins on top of the local frontend dev servers
    cors_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"] + _env_list("CORS_ORIGINS")
    )

    image_max_bytes: int = int(os.getenv("IMAGE_MAX_BYTES", str(5 * 1024 * 1024)))
    image_max_width: int = int(os.getenv("IMAGE_MAX_WIDTH", "800"))
    image_max_height: int = int(os.getenv("IMAGE_MAX_HEIGHT", "600"))
    image_quality: int = int(os.getenv("IMAGE_QUALITY", "85"))


settings = Settings()
