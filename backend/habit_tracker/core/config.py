"""
Application configuration and environment variables
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment ('1', 'true', 'yes', 'on')"""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables"""

    # Storage
    HABITS_DATA_DIR: Path = Path(os.getenv("HABITS_DATA_DIR", "~/.habit_tracker")).expanduser()

    # Calendar
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "America/Sao_Paulo")

    # Bootstrap
    SEED_SAMPLE_HABITS: bool = _env_flag("SEED_SAMPLE_HABITS", False)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# Create a global settings instance
settings = Settings()
