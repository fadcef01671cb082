from .base import DHCPAPIRepository
from .dataclasses import (
    DHCPGlobalOptions,
    DHCPGlobals,
    DHCPLease,
    DHCPScope,
    DHCPScopeOptions,
    DHCPScopeRange,
)
from .exceptions import (
    BadStatusCodeError,
    DHCPConnectionError,
    DHCPCtlError,
    InvalidFilterError,
    LookupFailedError,
    MissingConfigFileError,
    MissingUrlError,
    ResponseDecodeError,
    TimestampParseError,
)
from .isc_dhcp_repository import ISCDHCPAPIRepository
from .manager import DHCPManager
from .stub import StubDHCPAPIRepository
from .vendors import MacVendorLookup


def get_dhcp_api_repository_class(
    api_url: str,
) -> type[DHCPAPIRepository]:
    """Get DHCP API repository class for the configured url."""
    if api_url:
        return ISCDHCPAPIRepository
    return StubDHCPAPIRepository


__all__ = [
    "DHCPAPIRepository",
    "DHCPManager",
    "ISCDHCPAPIRepository",
    "StubDHCPAPIRepository",
    "MacVendorLookup",
    "get_dhcp_api_repository_class",
    "DHCPGlobals",
    "DHCPGlobalOptions",
    "DHCPLease",
    "DHCPScope",
    "DHCPScopeOptions",
    "DHCPScopeRange",
    "DHCPCtlError",
    "BadStatusCodeError",
    "DHCPConnectionError",
    "InvalidFilterError",
    "LookupFailedError",
    "MissingConfigFileError",
    "MissingUrlError",
    "ResponseDecodeError",
    "TimestampParseError",
]
