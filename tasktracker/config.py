from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class AppConfig:
    host: str
    port: int
    log_level: str
    cors_allow_origins: List[str]


def load_config_from_env() -> AppConfig:
    """
    Reads service settings from environment variables (and .env, if present).
    """
    host = os.getenv("APP_HOST", "0.0.0.0")
    port = int(os.getenv("APP_PORT", "8090"))
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    origins = os.getenv("CORS_ALLOW_ORIGINS", "*")

    return AppConfig(
        host=host,
        port=port,
        log_level=log_level,
        cors_allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )
