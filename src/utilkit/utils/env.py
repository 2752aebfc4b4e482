"""Environment variable helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "UTILKIT_ENV"


def load_env_file(path: str | Path = ".env") -> bool:
    """Load environment variables from a .env file if present."""

    env_path = Path(path)
    if not env_path.exists():
        return False
    LOGGER.debug("Loading environment from %s", env_path)
    return load_dotenv(env_path)


def selected_environment(default: Optional[str] = None) -> Optional[str]:
    """Return the configuration environment chosen through ``UTILKIT_ENV``."""

    return os.getenv(CONFIG_ENV_VAR) or default


__all__ = ["CONFIG_ENV_VAR", "load_env_file", "selected_environment"]
