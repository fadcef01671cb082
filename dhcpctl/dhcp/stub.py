"""Stub DHCP API repository.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import NoReturn

from .base import DHCPAPIRepository
from .exceptions import MissingUrlError
from .utils import logger_wraps


class StubDHCPAPIRepository(DHCPAPIRepository):
    """Repository used while the API url is not configured."""

    @logger_wraps(is_stub=True)
    async def get_globals(self) -> NoReturn:
        raise MissingUrlError

    @logger_wraps(is_stub=True)
    async def list_scopes(self) -> NoReturn:
        raise MissingUrlError

    @logger_wraps(is_stub=True)
    async def list_leases(self, cidr: str) -> NoReturn:  # noqa: ARG002
        raise MissingUrlError

    @logger_wraps(is_stub=True)
    async def search_leases(self, query: str) -> NoReturn:  # noqa: ARG002
        raise MissingUrlError
