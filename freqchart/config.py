import os
import codecs
import logging
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(NamedTuple):
    length: int = 10
    bar_width: int = 75
    axis_width: int = 80
    encoding: str = "utf-8"
    show_progress: bool = True
    log_level: str = "WARNING"


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}.")
    if value < 1:
        raise ConfigurationError(f"{name} must be a positive integer, got {value}.")
    return value


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Reads settings from the environment, after loading a .env file if one exists.

    Variables already set in the environment take precedence over the .env file.

    Raises:
        ConfigurationError: if a variable holds an invalid value.
    """
    load_dotenv(dotenv_path)

    encoding = os.getenv("FREQCHART_ENCODING", "utf-8")
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ConfigurationError(f"FREQCHART_ENCODING names an unknown encoding: {encoding!r}.")

    log_level = os.getenv("FREQCHART_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"FREQCHART_LOG_LEVEL is not a logging level: {log_level!r}.")

    settings = Settings(
        length=_positive_int("FREQCHART_LENGTH", 10),
        bar_width=_positive_int("FREQCHART_BAR_WIDTH", 75),
        axis_width=_positive_int("FREQCHART_AXIS_WIDTH", 80),
        encoding=encoding,
        show_progress=os.getenv("FREQCHART_SHOW_PROGRESS", "true").lower() == "true",
        log_level=log_level,
    )
    logger.debug(f"Settings loaded: {settings}")
    return settings
