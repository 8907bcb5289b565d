import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

TRUTHY = ("true", "1", "yes")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


def _env_number(name: str, default: float, cast=float, allow_zero: bool = False):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        number = cast(value)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {value!r}. Using default {default}")
        return default
    if number < 0 or (number == 0 and not allow_zero):
        logger.warning(f"{name} must be positive, got {value!r}. Using default {default}")
        return default
    return number


def _env_log_level(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Invalid value for {name}: {value!r}. Using default {default}")
        return default
    return level


@dataclass(frozen=True)
class Settings:
    scrape_interval_minutes: int = 30
    enable_scheduler: bool = True
    http_timeout_seconds: float = 15.0
    retry_wait_seconds: float = 2.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.
        Call load_dotenv() first if a .env file should be honoured.
        """
        return cls(
            scrape_interval_minutes=_env_number("SCRAPE_INTERVAL_MINUTES", 30, int),
            enable_scheduler=_env_bool("ENABLE_SCHEDULER", True),
            http_timeout_seconds=_env_number("HTTP_TIMEOUT_SECONDS", 15.0),
            retry_wait_seconds=_env_number("RETRY_WAIT_SECONDS", 2.0, allow_zero=True),
            log_level=_env_log_level("LOG_LEVEL", "INFO"),
        )
