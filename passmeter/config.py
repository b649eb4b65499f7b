"""PassMeter configuration values and logging setup.

Invalid environment values fall back to the defaults with a warning.
"""

import logging
import math
import os
from pathlib import Path

log = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_BLACKLIST = BASE_DIR / "data" / "most-common-passwords.txt"
DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def _env_timeout() -> float:
    raw = os.environ.get("PASSMETER_FETCH_TIMEOUT")
    if raw is None:
        return DEFAULT_FETCH_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not (math.isfinite(value) and value > 0):
        log.warning(
            "Ignoring PASSMETER_FETCH_TIMEOUT=%r; using %s seconds",
            raw, DEFAULT_FETCH_TIMEOUT,
        )
        return DEFAULT_FETCH_TIMEOUT
    return value


def _env_log_level() -> str:
    raw = os.environ.get("PASSMETER_LOG_LEVEL")
    if raw is None:
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    # getLevelName maps known names to ints and anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        log.warning(
            "Ignoring PASSMETER_LOG_LEVEL=%r; using %s", raw, DEFAULT_LOG_LEVEL,
        )
        return DEFAULT_LOG_LEVEL
    return level


BLACKLIST_SOURCE = os.environ.get("PASSMETER_BLACKLIST", str(DEFAULT_BLACKLIST))
FETCH_TIMEOUT = _env_timeout()
LOG_LEVEL = _env_log_level()


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for the CLI and web entry points."""
    logging.basicConfig(
        level=level if level is not None else LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
