"""Lease table view.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from collections.abc import Sequence

from rich.console import Console

from dhcpctl.dhcp.dataclasses import DHCPLease
from dhcpctl.dhcp.utils import format_timestamp, mac_prefix
from dhcpctl.dhcp.vendors import MacVendorLookup

from .formatting import add_row, make_table, or_empty

NO_LEASES_MESSAGE = "No leases found"

LEASE_TITLES = (
    "MAC Address",
    "Status",
    "IP",
    "Hostname",
    "Starts",
    "Ends",
    "Vendor Identifier",
)
VENDOR_TITLE = "Mac Vendor"


def lease_row(lease: DHCPLease) -> list[str]:
    """Build table cells of a lease.

    :raises TimestampParseError: starts or ends is not RFC 3339
    """
    return [
        lease.hardware_ethernet,
        lease.binding_state,
        lease.ip,
        or_empty(lease.client_hostname),
        format_timestamp(lease.starts),
        format_timestamp(lease.ends),
        or_empty(lease.set_vendor_class_identifier),
    ]


class LeaseView:
    """Render leases, optionally with MAC vendor names."""

    def __init__(
        self,
        console: Console,
        vendor_lookup: MacVendorLookup,
    ) -> None:
        """Set output console and vendor lookup."""
        self._console = console
        self._vendor_lookup = vendor_lookup

    async def render(
        self,
        leases: Sequence[DHCPLease],
        mac_lookup: bool = False,
    ) -> None:
        """Print lease table.

        Every row is built before anything is printed, so a failed vendor
        lookup or a bad timestamp leaves the output empty.

        :raises LookupFailedError: vendor enrichment aborted
        :raises TimestampParseError: bad lease timestamp
        """
        if not leases:
            self._console.print(NO_LEASES_MESSAGE)
            return

        vendors: dict[str, str] = {}
        if mac_lookup:
            vendors = await self._vendor_lookup.build_vendor_map(
                {mac_prefix(lease.hardware_ethernet) for lease in leases},
            )

        rows = []
        for lease in leases:
            row = lease_row(lease)
            if mac_lookup:
                prefix = mac_prefix(lease.hardware_ethernet)
                row.insert(0, vendors.get(prefix, ""))
            rows.append(row)

        titles = (VENDOR_TITLE, *LEASE_TITLES) if mac_lookup else LEASE_TITLES
        table = make_table(*titles)
        for row in rows:
            add_row(table, row)

        self._console.print(table)
