"""Tracker configuration — env-driven via pydantic-settings.

Reads from a ``.env`` file and ``PLUGINTRACK_*`` environment variables.
The developer-mode flag is consumed once, when an ``ActionTable`` is built
with ``ActionTable.from_config``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerConfig(BaseSettings):
    """Runtime configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export PLUGINTRACK_DEVELOPER_MODE=true
        export PLUGINTRACK_ROOT=/opt/Fiji.app
        export PLUGINTRACK_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PLUGINTRACK_",
        env_file_encoding="utf-8",
    )

    # Logging; debug forces DEBUG regardless of log_level
    log_level: str = "INFO"
    debug: bool = False

    # Exposes upload/remove actions
    developer_mode: bool = False

    # Installation root and the staging directory beneath it
    root: Path = Path(".")
    update_dir: str = "update"


# Module-level singleton — import as `from plugintrack.config import config`
config = TrackerConfig()
