"""Exceptions for DHCP API client.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique
from typing import ClassVar

from dhcpctl.errors import BaseDomainException


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    DHCP_MISSING_CONFIG_FILE_ERROR = 1
    DHCP_MISSING_URL_ERROR = 2
    DHCP_INVALID_FILTER_ERROR = 3
    DHCP_BAD_STATUS_CODE_ERROR = 4
    DHCP_TIMESTAMP_PARSE_ERROR = 5
    DHCP_LOOKUP_FAILED_ERROR = 6
    DHCP_CONNECTION_ERROR = 7
    DHCP_RESPONSE_DECODE_ERROR = 8


class DHCPCtlError(BaseDomainException):
    """dhcpctl base exception."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR
    default_message: ClassVar[str] = "dhcpctl error"

    def __init__(self, *args: object) -> None:
        """Fall back to the class message when none is given."""
        super().__init__(*(args or (self.default_message,)))


class MissingConfigFileError(DHCPCtlError):
    """Config file not found."""

    code = ErrorCodes.DHCP_MISSING_CONFIG_FILE_ERROR
    default_message = "Config file not found."


class MissingUrlError(DHCPCtlError):
    """DHCP API url is not configured."""

    code = ErrorCodes.DHCP_MISSING_URL_ERROR
    default_message = (
        "The URL for the ISC DHCP API is missing. "
        "Set it with 'dhcpctl set config --url https://ip-or-domain-name'"
    )


class InvalidFilterError(DHCPCtlError):
    """Lease filter is not a valid IPv4 CIDR or address."""

    code = ErrorCodes.DHCP_INVALID_FILTER_ERROR
    default_message = "Not a valid CIDR."


class BadStatusCodeError(DHCPCtlError):
    """DHCP API answered with a non-success status."""

    code = ErrorCodes.DHCP_BAD_STATUS_CODE_ERROR
    default_message = "Bad status code."
    exit_status = 2


class TimestampParseError(DHCPCtlError):
    """Lease timestamp is not RFC 3339."""

    code = ErrorCodes.DHCP_TIMESTAMP_PARSE_ERROR
    default_message = "Invalid lease timestamp."


class LookupFailedError(DHCPCtlError):
    """MAC vendor enrichment aborted."""

    code = ErrorCodes.DHCP_LOOKUP_FAILED_ERROR
    default_message = "MAC vendor lookup failed."


class DHCPConnectionError(DHCPCtlError):
    """DHCP API transport error."""

    code = ErrorCodes.DHCP_CONNECTION_ERROR
    default_message = "Failed to connect to the DHCP API."


class ResponseDecodeError(DHCPCtlError):
    """DHCP API response body has an unexpected shape."""

    code = ErrorCodes.DHCP_RESPONSE_DECODE_ERROR
    default_message = "Failed to decode the DHCP API response."
