import logging
import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "Library Menu")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")

    # Start the console with the sample catalog
    seed_demo_books: bool = _env_flag("LIBRARY_SEED_DEMO", "True")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    debug: bool = _env_flag("DEBUG", "False")


settings = Settings()


def configure_logging(config: Settings = settings) -> None:
    """Send log records to stderr so menu output on stdout stays untouched."""
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
