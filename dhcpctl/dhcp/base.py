"""Abstract DHCP API repository.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from abc import ABC, abstractmethod

import httpx

from .dataclasses import DHCPGlobals, DHCPLease, DHCPScope


class DHCPAPIRepository(ABC):
    """Abstract DHCP API repository."""

    _client: httpx.AsyncClient

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize the repository with an HTTP client."""
        self._client = client

    @abstractmethod
    async def get_globals(self) -> DHCPGlobals:
        """Get server wide configuration."""

    @abstractmethod
    async def list_scopes(self) -> list[DHCPScope]:
        """Get all scopes."""

    @abstractmethod
    async def list_leases(self, cidr: str) -> list[DHCPLease]:
        """List leases inside a network, all leases for empty ``cidr``."""

    @abstractmethod
    async def search_leases(self, query: str) -> list[DHCPLease]:
        """Search leases by hostname, MAC or vendor class identifier."""
