"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Values from a local `.env` are respected.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

APP_DIRNAME = "eldar"
DB_FILENAME = "eldar.db"


@dataclass
class Settings:
    # Storage root override; platform directory is used when unset
    data_dir: Optional[str] = field(default_factory=lambda: os.getenv("ELDAR_DATA_DIR"))
    app_dirname: str = APP_DIRNAME
    db_filename: str = DB_FILENAME

    # API client
    api_timeout: float = field(
        default_factory=lambda: float(os.getenv("ELDAR_API_TIMEOUT", "5"))
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("ELDAR_LOG_LEVEL", "INFO"))


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
