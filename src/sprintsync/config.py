"""Runtime settings loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class ConfigError(Exception):
    """Raised when a setting has an invalid value."""


DEFAULT_DB_PATH = "sprintsync.db"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass
class Settings:
    """Process-wide settings.

    Sync parameters (tokens, board coordinates) are per invocation and are not
    part of this object.
    """

    db_path: str = DEFAULT_DB_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_dir: str | None = None
    log_level: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from SPRINTSYNC_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings.

        Raises:
            ConfigError: If SPRINTSYNC_PORT is not an integer.
        """
        env = os.environ if environ is None else environ

        raw_port = env.get("SPRINTSYNC_PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigError(f"SPRINTSYNC_PORT must be an integer, got {raw_port!r}") from e

        return cls(
            db_path=env.get("SPRINTSYNC_DB_PATH", DEFAULT_DB_PATH),
            host=env.get("SPRINTSYNC_HOST", DEFAULT_HOST),
            port=port,
            log_dir=env.get("SPRINTSYNC_LOG_DIR"),
            log_level=env.get("SPRINTSYNC_LOG_LEVEL"),
        )
