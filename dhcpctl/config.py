"""Module with settings.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, Field, HttpUrl, PositiveFloat, PositiveInt


def _default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "dhcpctl" / "config.json"


class Settings(BaseModel):
    """Runtime settings, read from ``DHCPCTL_*`` environment variables."""

    ENV_PREFIX: ClassVar[str] = "DHCPCTL_"

    DEBUG: bool = False

    CONFIG_PATH: Path = Field(default_factory=_default_config_path)

    DHCP_API_TIMEOUT_SECONDS: PositiveFloat = 30

    VENDOR_API_URL: HttpUrl = HttpUrl("https://macvendors.co")
    VENDOR_LOOKUP_TIMEOUT_SECONDS: PositiveFloat = 10
    VENDOR_MAX_CONN: PositiveInt = 100

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(
            **{
                key.removeprefix(cls.ENV_PREFIX): value
                for key, value in os.environ.items()
                if key.startswith(cls.ENV_PREFIX)
            },
        )
