"""ISC DHCP API repository implementation.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from adaptix.load_error import LoadError

from .base import DHCPAPIRepository
from .constants import (
    GLOBALS_PATH,
    LEASES_PATH,
    LEASES_SEARCH_PATH,
    SCOPES_PATH,
)
from .dataclasses import DHCPGlobals, DHCPLease, DHCPScope
from .exceptions import (
    BadStatusCodeError,
    DHCPConnectionError,
    ResponseDecodeError,
)
from .retorts import dhcp_api_retort
from .utils import logger_wraps

_T = TypeVar("_T")


class ISCDHCPAPIRepository(DHCPAPIRepository):
    """Repository for interacting with the ISC DHCP REST API.

    The client is expected to carry the API base url and the
    ``Authorization`` header already.
    """

    @staticmethod
    def _validate_api_response(response: httpx.Response) -> None:
        """Validate API response."""
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as err:
            raise BadStatusCodeError(str(err)) from err

    async def _get(self, path: str) -> Any:
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as err:
            raise DHCPConnectionError(
                f"Failed to communicate with DHCP API: {err}",
            ) from err

        self._validate_api_response(response)

        try:
            return response.json()
        except ValueError as err:
            raise ResponseDecodeError(
                f"Invalid json from {path}: {err}",
            ) from err

    async def _get_as(self, path: str, tp: type[_T]) -> _T:
        data = await self._get(path)
        try:
            return dhcp_api_retort.load(data, tp)
        except LoadError as err:
            raise ResponseDecodeError(
                f"Unexpected payload from {path}: {err}",
            ) from err

    @logger_wraps()
    async def get_globals(self) -> DHCPGlobals:
        """Get server wide configuration."""
        return await self._get_as(GLOBALS_PATH, DHCPGlobals)

    @logger_wraps()
    async def list_scopes(self) -> list[DHCPScope]:
        """Get all scopes."""
        return await self._get_as(SCOPES_PATH, list[DHCPScope])

    @logger_wraps()
    async def list_leases(self, cidr: str) -> list[DHCPLease]:
        """List leases inside a network, all leases for empty ``cidr``."""
        return await self._get_as(LEASES_PATH + cidr, list[DHCPLease])

    @logger_wraps()
    async def search_leases(self, query: str) -> list[DHCPLease]:
        """Search leases by hostname, MAC or vendor class identifier."""
        return await self._get_as(
            LEASES_SEARCH_PATH + quote(query, safe=":"),
            list[DHCPLease],
        )
