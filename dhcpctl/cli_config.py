"""Persisted CLI configuration.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ValidationError

from dhcpctl.dhcp.exceptions import DHCPCtlError, MissingConfigFileError

NO_CONFIG_MESSAGE = (
    "No config file found at {path}, created one for you.\n"
    "Please set the API URL with "
    "'dhcpctl set config --url https://ip-or-domain-name'"
)


class CLIConfig(BaseModel):
    """ISC DHCP API location and credentials."""

    api_url: str = ""
    auth_token: str = ""


class CLIConfigStore:
    """Load and store :class:`CLIConfig` as a JSON file."""

    def __init__(self, path: Path) -> None:
        """Set config file path."""
        self.path = path

    def exists(self) -> bool:
        """Check config file exists."""
        return self.path.exists()

    def load(self) -> CLIConfig:
        """Load config, defaults when the file is absent.

        :raises DHCPCtlError: file is unreadable or not a valid config
        """
        if not self.exists():
            return CLIConfig()

        try:
            return CLIConfig.model_validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as err:
            raise DHCPCtlError(f"[config-file] {self.path}: {err}") from err

    def store(self, config: CLIConfig) -> None:
        """Write config, creating parent directories.

        :raises DHCPCtlError: file can not be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(config.model_dump_json(indent=2))
        except OSError as err:
            raise DHCPCtlError(f"[config-file] {self.path}: {err}") from err
        logger.debug(f"Config stored to {self.path}")

    def ensure_exists(self) -> CLIConfig:
        """Load config, create a default one if missing.

        :raises MissingConfigFileError: file was missing and got created
        """
        if not self.exists():
            self.store(CLIConfig())
            raise MissingConfigFileError(
                NO_CONFIG_MESSAGE.format(path=self.path),
            )
        return self.load()

    def update(
        self,
        api_url: str | None = None,
        auth_token: str | None = None,
    ) -> CLIConfig:
        """Set given values and store the result."""
        config = self.load()
        changes = {
            key: value
            for key, value in (
                ("api_url", api_url),
                ("auth_token", auth_token),
            )
            if value is not None
        }
        config = config.model_copy(update=changes)
        self.store(config)
        return config
