"""CLI configuration view.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from rich.console import Console

from dhcpctl.cli_config import CLIConfig

from .formatting import print_field


def render_config(console: Console, config: CLIConfig) -> None:
    """Print stored API url and token."""
    print_field(console, "API URL:", config.api_url)
    print_field(console, "Auth token:", config.auth_token)
