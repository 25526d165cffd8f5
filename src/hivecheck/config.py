"""Connection configuration.

Uses pydantic-settings for type-safe configuration from environment variables,
optionally overlaid with values from a YAML file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class HiveSettings(BaseSettings):
    """HiveServer2 / beeline settings.

    All settings can be overridden via environment variables.
    Prefix: HIVE_ (so HIVE_SERVER and HIVE_PORT work as-is)
    """

    model_config = SettingsConfigDict(
        env_prefix="HIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    server: str = Field(default="", description="HiveServer2 host name")
    port: int = Field(default=10000, ge=1, le=65535, description="HiveServer2 port")
    database: str = Field(default="default", description="Database in the JDBC URL")

    beeline_path: str = Field(
        default="beeline", description="beeline executable name or path"
    )
    fast_connect: bool = Field(
        default=True, description="Skip building the tab-completion list on connect"
    )
    silent: bool = Field(default=True, description="Suppress beeline banners")
    extra_options: list[str] = Field(
        default_factory=list,
        description="Additional beeline flags passed to every invocation",
    )

    @property
    def jdbc_url(self) -> str:
        return f"jdbc:hive2://{self.server}:{self.port}/{self.database}"


def load_settings(yaml_path: str | Path | None = None) -> HiveSettings:
    """Build settings from the environment, overlaid with a YAML file.

    Values in the YAML file take precedence over environment variables.

    Args:
        yaml_path: Optional YAML file with HiveSettings field names as keys

    Returns:
        Validated settings

    Raises:
        FileNotFoundError: If yaml_path is given but does not exist

    """
    overrides: dict[str, Any] = {}
    if yaml_path is not None:
        yaml_file = Path(yaml_path)
        if not yaml_file.exists():
            msg = f"Settings file not found: {yaml_file}"
            raise FileNotFoundError(msg)
        with yaml_file.open(encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        logger.debug(f"Loaded settings overrides from {yaml_file}: {sorted(overrides)}")

    return HiveSettings(**overrides)


__all__ = ["HiveSettings", "load_settings"]
