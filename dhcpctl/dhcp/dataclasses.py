"""Data classes for ISC DHCP API payloads.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DHCPLease:
    """Data class for DHCP lease."""

    binding_state: str
    cltt: str
    starts: str
    ends: str
    hardware_ethernet: str
    ip: str
    client_hostname: str | None = None
    next_binding_state: str | None = None
    rewind_binding_state: str | None = None
    set_vendor_class_identifier: str | None = None
    uid: str | None = None


@dataclass(frozen=True)
class DHCPScopeRange:
    """Data class for scope address range."""

    start: str
    end: str


@dataclass(frozen=True)
class DHCPScopeOptions:
    """Data class for scope options."""

    subnet_mask: str
    broadcast_address: str
    routers: str
    tftp_server_name: str | None = None
    bootfile_name: str | None = None
    domain_name: str | None = None
    domain_name_servers: list[str] | None = None


@dataclass(frozen=True)
class DHCPScope:
    """Data class for DHCP scope."""

    ip: str
    subnet: str
    range: DHCPScopeRange
    options: DHCPScopeOptions
    next_server: str | None = None
    default_lease_time: str | int | None = None
    max_lease_time: str | int | None = None


@dataclass(frozen=True)
class DHCPGlobalOptions:
    """Data class for server wide options."""

    domain_name: str | None = None
    domain_name_servers: list[str] | None = None


@dataclass(frozen=True)
class DHCPGlobals:
    """Data class for DHCP global configuration."""

    authoritative: bool | None = None
    default_lease_time: str | int | None = None
    max_lease_time: str | int | None = None
    options: DHCPGlobalOptions | None = None


@dataclass(frozen=True)
class MacVendorRecord:
    """Single vendor service record."""

    company: str
    mac_prefix: str | None = None


@dataclass(frozen=True)
class MacVendorResponse:
    """Vendor service response envelope."""

    result: MacVendorRecord
