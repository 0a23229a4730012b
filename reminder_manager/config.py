"""
Reminder Manager configuration.

Values come from the environment, optionally seeded from a .env file:

    REMINDERS_LOG_LEVEL    logging level for the console app (default WARNING)
    REMINDERS_DATE_FORMAT  strptime/strftime format for dates (default %d.%m.%y)
    REMINDERS_ENV_FILE     alternative .env location
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from reminder_manager.core.date_utils import DEFAULT_DATE_FORMAT

logger = logging.getLogger(__name__)

DEFAULT_ENV_PATH = Path(__file__).parent.parent / ".env"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved application settings"""
    log_level: int = logging.WARNING
    date_format: str = DEFAULT_DATE_FORMAT


def _load_env_file(env_path: Optional[Path] = None) -> bool:
    """Load environment variables from .env file if it exists."""
    if env_path is None:
        env_path = Path(os.environ.get("REMINDERS_ENV_FILE", DEFAULT_ENV_PATH))
    if not env_path.exists():
        return False

    # Variables already set in the real environment win
    load_dotenv(env_path, override=False)
    logger.debug(f"Loaded environment from {env_path}")
    return True


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    logger.warning(f"Unknown log level {value!r}, using {DEFAULT_LOG_LEVEL}")
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def load_settings(env_path: Optional[Path] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_path: .env file to read first (default: REMINDERS_ENV_FILE or <project>/.env)

    Returns:
        Frozen Settings instance
    """
    _load_env_file(env_path)

    date_format = os.environ.get("REMINDERS_DATE_FORMAT", "").strip() or DEFAULT_DATE_FORMAT
    log_level = _parse_log_level(os.environ.get("REMINDERS_LOG_LEVEL", DEFAULT_LOG_LEVEL))

    return Settings(log_level=log_level, date_format=date_format)
