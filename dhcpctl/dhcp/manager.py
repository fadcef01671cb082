"""DHCP manager for reading ISC DHCP server state.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from ipaddress import IPv4Network

from .base import DHCPAPIRepository
from .constants import CIDR_PREFIX_LENGTH_RE
from .dataclasses import DHCPGlobals, DHCPLease, DHCPScope
from .exceptions import InvalidFilterError


def validate_cidr(cidr: str) -> None:
    """Check IPv4 CIDR or bare IPv4 address, host bits may be set.

    Only a prefix length is accepted after the slash, netmask forms are
    not understood by the API.

    :raises InvalidFilterError: not an IPv4 network or address
    """
    _, slash, prefix_length = cidr.partition("/")
    if slash and not CIDR_PREFIX_LENGTH_RE.fullmatch(prefix_length):
        raise InvalidFilterError(f"Not a valid CIDR: {cidr!r}")

    try:
        IPv4Network(cidr, strict=False)
    except ValueError as err:
        raise InvalidFilterError(f"Not a valid CIDR: {cidr!r}") from err


class DHCPManager:
    """Read only ISC DHCP manager."""

    _api_repository: DHCPAPIRepository

    def __init__(self, api_repository: DHCPAPIRepository) -> None:
        """Initialize DHCP manager."""
        self._api_repository = api_repository

    async def get_globals(self) -> DHCPGlobals:
        """Get server wide configuration."""
        return await self._api_repository.get_globals()

    async def get_scopes(self) -> list[DHCPScope]:
        """Get all scopes."""
        return await self._api_repository.list_scopes()

    async def get_scope(self, subnet_id: str) -> list[DHCPScope]:
        """Get scopes whose network id equals ``subnet_id``."""
        scopes = await self._api_repository.list_scopes()
        return [scope for scope in scopes if scope.ip == subnet_id]

    async def list_leases(self, cidr: str | None = None) -> list[DHCPLease]:
        """List leases, optionally limited to a network.

        An empty or missing filter fetches all leases.

        :raises InvalidFilterError: before any request is made
        """
        cidr = cidr or ""
        if cidr:
            validate_cidr(cidr)
        return await self._api_repository.list_leases(cidr)

    async def search_leases(self, query: str) -> list[DHCPLease]:
        """Search leases, matching is done by the server."""
        return await self._api_repository.search_leases(query)
