"""Scope views.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from collections.abc import Sequence

from rich.console import Console

from dhcpctl.dhcp.dataclasses import DHCPScope

from .formatting import add_row, make_table, or_empty, print_field

NO_SCOPE_MESSAGE = "No subnet found by that ID"
NOT_SET = "Not set"


def render_scopes(
    console: Console,
    scopes: Sequence[DHCPScope],
    pxe: bool = False,
    dns: bool = False,
) -> None:
    """Print scopes table, ``dns`` and ``pxe`` add option columns."""
    titles = [
        "Subnet ID",
        "Subnet Mask",
        "Scope Start",
        "Scope End",
        "Gateway",
    ]
    if dns:
        titles.append("DNS Servers")
    if pxe:
        titles.extend(("TFTP Server", "Bootfile", "Next Server"))

    table = make_table(*titles)

    for scope in scopes:
        row = [
            scope.ip,
            scope.subnet,
            scope.range.start,
            scope.range.end,
            scope.options.routers,
        ]
        if dns:
            row.append(",".join(scope.options.domain_name_servers or []))
        if pxe:
            row.extend(
                (
                    or_empty(scope.options.tftp_server_name),
                    or_empty(scope.options.bootfile_name),
                    or_empty(scope.next_server),
                ),
            )
        add_row(table, row)

    console.print(table)


def render_scope_details(
    console: Console,
    scopes: Sequence[DHCPScope],
) -> None:
    """Print key/value details of matching scopes."""
    if not scopes:
        console.print(NO_SCOPE_MESSAGE)
        return

    for scope in scopes:
        options = scope.options
        print_field(console, "Network ID:", scope.ip)
        print_field(console, "Subnet Mask:", scope.subnet)
        print_field(
            console,
            "Scope Range:",
            f"{scope.range.start} - {scope.range.end}",
        )
        print_field(console, "Gateway:", options.routers)

        if (
            options.tftp_server_name is not None
            or options.bootfile_name is not None
            or scope.next_server is not None
        ):
            console.print()
            print_field(
                console,
                "TFTP Server:",
                options.tftp_server_name or NOT_SET,
            )
            print_field(console, "Bootfile:", options.bootfile_name or NOT_SET)
            print_field(console, "Next Server:", scope.next_server or NOT_SET)

        if options.domain_name_servers is not None:
            console.print()
            print_field(
                console,
                "DNS Servers:",
                ",".join(options.domain_name_servers),
            )

        if options.domain_name is not None:
            console.print()
            print_field(console, "Domain Name:", options.domain_name)

        if scope.default_lease_time is not None:
            console.print()
            print_field(
                console,
                "Default Lease Time:",
                scope.default_lease_time,
            )

        if scope.max_lease_time is not None:
            console.print()
            print_field(console, "Max Lease Time:", scope.max_lease_time)
