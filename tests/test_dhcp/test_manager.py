"""Test DHCP manager.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from unittest.mock import AsyncMock

import pytest

from dhcpctl.dhcp import (
    DHCPAPIRepository,
    DHCPManager,
    DHCPScope,
    DHCPScopeOptions,
    DHCPScopeRange,
    InvalidFilterError,
)
from tests.conftest import LeaseFactory


@pytest.fixture
def api_repository() -> AsyncMock:
    """Get mock DHCP API repository."""
    return AsyncMock(spec=DHCPAPIRepository)


@pytest.fixture
def dhcp_manager(api_repository: AsyncMock) -> DHCPManager:
    """Get DHCP manager over mock repository."""
    return DHCPManager(api_repository)


def _scope(ip: str) -> DHCPScope:
    return DHCPScope(
        ip=ip,
        subnet="255.255.255.0",
        range=DHCPScopeRange(start="10.3.0.100", end="10.3.0.200"),
        options=DHCPScopeOptions(
            subnet_mask="255.255.255.0",
            broadcast_address="10.3.0.255",
            routers="10.3.0.1",
        ),
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("cidr", [None, ""])
async def test_list_leases_without_filter(
    dhcp_manager: DHCPManager,
    api_repository: AsyncMock,
    make_lease: LeaseFactory,
    cidr: str | None,
) -> None:
    """Test empty and missing filter fetch all leases."""
    leases = [make_lease()]
    api_repository.list_leases.return_value = leases

    result = await dhcp_manager.list_leases(cidr)

    assert result == leases
    api_repository.list_leases.assert_awaited_once_with("")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "cidr",
    ["10.3.0.0/24", "10.3.0.120", "10.3.0.1/24", "0.0.0.0/0"],
)
async def test_list_leases_with_filter(
    dhcp_manager: DHCPManager,
    api_repository: AsyncMock,
    cidr: str,
) -> None:
    """Test valid filter is passed unchanged."""
    api_repository.list_leases.return_value = []

    assert await dhcp_manager.list_leases(cidr) == []
    api_repository.list_leases.assert_awaited_once_with(cidr)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "cidr",
    [
        "not-a-cidr",
        "10.3.0.0/33",
        "10.3.0",
        "10.3.0.256",
        "fe80::/64",
        " 10.3.0.0/24",
        "10.3.0.0/255.255.255.0",
        "10.3.0.0/0.0.0.255",
        "10.3.0.0/",
        "10.3.0.0/+24",
    ],
)
async def test_list_leases_invalid_filter(
    dhcp_manager: DHCPManager,
    api_repository: AsyncMock,
    cidr: str,
) -> None:
    """Test invalid filter fails before any request."""
    with pytest.raises(InvalidFilterError):
        await dhcp_manager.list_leases(cidr)

    api_repository.list_leases.assert_not_awaited()


@pytest.mark.asyncio
async def test_search_leases(
    dhcp_manager: DHCPManager,
    api_repository: AsyncMock,
    make_lease: LeaseFactory,
) -> None:
    """Test search is delegated without local filtering."""
    leases = [make_lease(client_hostname=None), make_lease(ip="10.3.0.121")]
    api_repository.search_leases.return_value = leases

    assert await dhcp_manager.search_leases("iphone") == leases
    api_repository.search_leases.assert_awaited_once_with("iphone")


@pytest.mark.asyncio
async def test_get_scope(
    dhcp_manager: DHCPManager,
    api_repository: AsyncMock,
) -> None:
    """Test scope is selected by network id."""
    api_repository.list_scopes.return_value = [
        _scope("10.3.0.0"),
        _scope("10.4.0.0"),
    ]

    result = await dhcp_manager.get_scope("10.4.0.0")

    assert [scope.ip for scope in result] == ["10.4.0.0"]
    assert await dhcp_manager.get_scope("10.5.0.0") == []
