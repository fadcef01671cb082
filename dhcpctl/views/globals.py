"""Global configuration view.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from rich.console import Console

from dhcpctl.dhcp.dataclasses import DHCPGlobals

from .formatting import print_field


def render_globals(console: Console, payload: DHCPGlobals) -> None:
    """Print server wide settings, absent values are skipped."""
    console.print()
    if payload.authoritative is not None:
        print_field(
            console,
            "Authoritative:",
            str(payload.authoritative).lower(),
        )
    if payload.default_lease_time is not None:
        print_field(
            console,
            "Default Lease Time:",
            payload.default_lease_time,
        )
    if payload.max_lease_time is not None:
        print_field(console, "Max Lease Time:", payload.max_lease_time)

    options = payload.options
    if options is not None:
        console.print()
        if options.domain_name is not None:
            print_field(console, "Domain name:", options.domain_name)
        if options.domain_name_servers is not None:
            print_field(
                console,
                "DNS Servers:",
                ", ".join(options.domain_name_servers),
            )
