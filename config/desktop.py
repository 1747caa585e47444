"""
Desktop configuration loaded from environment variables.

Reads an optional ``.env`` file first (python-dotenv), then the MATCH_*
variables. Anything not set keeps the built-in default.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .base import BaseConfiguration, ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_DIR = Path(__file__).parent.parent / "desktop_ui" / "images"


def _parse_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer (got {raw!r})") from None


@dataclass
class DesktopConfiguration(BaseConfiguration):
    """Configuration for the PySide6 desktop build."""

    @classmethod
    def load(cls) -> "DesktopConfiguration":
        load_dotenv()
        return cls.from_env(os.environ)

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "DesktopConfiguration":
        """
        Build configuration from a mapping of environment variables.

        Args:
            env: Variables to read (usually ``os.environ``)

        Returns:
            Validated DesktopConfiguration

        Raises:
            ConfigurationError: If a value is malformed or the board is invalid
        """
        config = cls(image_dir=DEFAULT_IMAGE_DIR)

        rows = _parse_int(env, "MATCH_ROWS")
        if rows is not None:
            config.rows = rows

        columns = _parse_int(env, "MATCH_COLUMNS")
        if columns is not None:
            config.columns = columns

        delay = _parse_int(env, "MATCH_FLIP_DELAY_MS")
        if delay is not None:
            config.flip_back_delay_ms = delay

        config.seed = _parse_int(env, "MATCH_SEED")

        identities = env.get("MATCH_IDENTITIES")
        if identities:
            config.identities = tuple(item.strip() for item in identities.split(",") if item.strip())

        image_dir = env.get("MATCH_IMAGE_DIR")
        if image_dir:
            config.image_dir = Path(image_dir).expanduser()

        title = env.get("MATCH_WINDOW_TITLE")
        if title:
            config.window_title = title

        log_level = env.get("MATCH_LOG_LEVEL", config.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"MATCH_LOG_LEVEL must name a logging level (got {log_level!r})")
        config.log_level = log_level

        logger.debug("Loaded desktop configuration: %s", config)
        return config.validate()
