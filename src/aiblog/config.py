"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `AIBLOG_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Site settings.

    All fields are environment-configurable. Prefix is `AIBLOG_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="AIBLOG_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")
    site_name: str = Field(default="AI-assisted-blog")

    # Content
    content_dir: Path = Field(default=Path("content"))
    content_selector: str = Field(default=".blog-content")

    # Outline
    # Delay before scanning after a content change, for renderers that never signal readiness
    scan_delay_s: float = Field(default=0.3, ge=0.0, le=10.0)
    dedupe_anchors: bool = Field(default=True)

    # Theme
    default_theme: Literal["light", "dark", "system"] = Field(default="system")


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("AIBLOG_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
