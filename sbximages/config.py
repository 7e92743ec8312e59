"""Tool settings — env-driven defaults for the sbximages CLI.

Reads from a .env file and SBXIMAGES_* environment variables. These only
supply defaults; explicit command-line options always win.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolSettings(BaseSettings):
    """CLI defaults with environment variable overrides.

    Examples
    --------
    Override via environment::

        export SBXIMAGES_LOG_LEVEL=DEBUG
        export SBXIMAGES_BUILD_DIR=/work/build
        export SBXIMAGES_COMMIT=$(git rev-parse --short HEAD)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SBXIMAGES_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Inputs and outputs
    config_path: Path = Path("config.yaml")
    build_dir: Path = Path("build")

    # Build metadata
    commit: str = ""


# Module-level singleton — import as `from sbximages.config import settings`
settings = ToolSettings()
