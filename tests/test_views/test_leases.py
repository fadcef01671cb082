"""Test lease table view.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import io
from unittest.mock import AsyncMock

import pytest
from rich.console import Console

from dhcpctl.dhcp import LookupFailedError, MacVendorLookup
from dhcpctl.dhcp.constants import RANDOMIZED_VENDOR
from dhcpctl.dhcp.exceptions import TimestampParseError
from dhcpctl.views import LeaseView
from dhcpctl.views.leases import NO_LEASES_MESSAGE
from tests.conftest import LeaseFactory


@pytest.fixture
def vendor_lookup() -> AsyncMock:
    """Get vendor lookup mock."""
    lookup = AsyncMock(spec=MacVendorLookup)
    lookup.build_vendor_map.return_value = {}
    return lookup


@pytest.fixture
def view(console: Console, vendor_lookup: AsyncMock) -> LeaseView:
    """Get lease view over captured console."""
    return LeaseView(console, vendor_lookup)


def _line_with(output: io.StringIO, needle: str) -> str:
    return next(
        line for line in output.getvalue().splitlines() if needle in line
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("mac_lookup", [True, False])
async def test_no_leases(
    view: LeaseView,
    vendor_lookup: AsyncMock,
    output: io.StringIO,
    mac_lookup: bool,
) -> None:
    """Test notice instead of a table, no lookup is made."""
    await view.render([], mac_lookup=mac_lookup)

    assert output.getvalue().strip() == NO_LEASES_MESSAGE
    vendor_lookup.build_vendor_map.assert_not_awaited()


@pytest.mark.asyncio
async def test_render_leases(
    view: LeaseView,
    vendor_lookup: AsyncMock,
    make_lease: LeaseFactory,
    output: io.StringIO,
) -> None:
    """Test lease columns and timestamp format."""
    await view.render(
        [make_lease(), make_lease(ip="10.3.0.121", client_hostname=None)],
    )

    text = output.getvalue()
    header = _line_with(output, "MAC Address")
    for title in ("Status", "IP", "Hostname", "Starts", "Ends"):
        assert title in header
    assert "Mac Vendor" not in text

    row = _line_with(output, "10.3.0.120")
    assert "a8:5e:45:33:44:55" in row
    assert "active" in row
    assert "iphone-anna" in row
    assert "2023-05-01 10:15:30" in row
    assert "2023-05-01 22:15:30" in row
    assert "MSFT 5.0" in row
    assert "iphone-anna" not in _line_with(output, "10.3.0.121")
    vendor_lookup.build_vendor_map.assert_not_awaited()


@pytest.mark.asyncio
async def test_vendor_column_is_first(
    view: LeaseView,
    vendor_lookup: AsyncMock,
    make_lease: LeaseFactory,
    output: io.StringIO,
) -> None:
    """Test vendor names are prepended to every row."""
    vendor_lookup.build_vendor_map.return_value = {
        "a8:5e:45": "Acme Corp",
        "02:42:ac": RANDOMIZED_VENDOR,
    }
    leases = [
        make_lease(),
        make_lease(ip="10.3.0.121", hardware_ethernet="A8:5E:45:00:00:01"),
        make_lease(ip="10.3.0.122", hardware_ethernet="02:42:ac:11:00:02"),
    ]

    await view.render(leases, mac_lookup=True)

    vendor_lookup.build_vendor_map.assert_awaited_once_with(
        {"a8:5e:45", "02:42:ac"},
    )
    header = _line_with(output, "MAC Address")
    assert header.index("Mac Vendor") < header.index("MAC Address")
    assert _line_with(output, "10.3.0.120").strip().startswith("Acme Corp")
    assert _line_with(output, "10.3.0.121").strip().startswith("Acme Corp")
    assert (
        _line_with(output, "10.3.0.122")
        .strip()
        .startswith(RANDOMIZED_VENDOR)
    )


@pytest.mark.asyncio
async def test_search_result(
    view: LeaseView,
    make_lease: LeaseFactory,
    output: io.StringIO,
) -> None:
    """Test single matched lease renders a single row."""
    await view.render([make_lease()])

    rows = [
        line
        for line in output.getvalue().splitlines()
        if "a8:5e:45:33:44:55" in line
    ]
    assert len(rows) == 1


@pytest.mark.asyncio
async def test_bad_timestamp_prints_nothing(
    view: LeaseView,
    make_lease: LeaseFactory,
    output: io.StringIO,
) -> None:
    """Test a bad timestamp fails before the table is printed."""
    leases = [make_lease(), make_lease(ends="2023-05-01 22:15")]

    with pytest.raises(TimestampParseError):
        await view.render(leases)

    assert output.getvalue() == ""


@pytest.mark.asyncio
async def test_failed_lookup_prints_nothing(
    view: LeaseView,
    vendor_lookup: AsyncMock,
    make_lease: LeaseFactory,
    output: io.StringIO,
) -> None:
    """Test aborted enrichment leaves output empty."""
    vendor_lookup.build_vendor_map.side_effect = LookupFailedError(
        "429 Too Many Requests",
    )

    with pytest.raises(LookupFailedError):
        await view.render([make_lease()], mac_lookup=True)

    assert output.getvalue() == ""


@pytest.mark.asyncio
async def test_markup_is_not_interpreted(
    view: LeaseView,
    make_lease: LeaseFactory,
    output: io.StringIO,
) -> None:
    """Test server values are printed literally."""
    await view.render([make_lease(client_hostname="[bold]host[/bold]")])

    assert "[bold]host[/bold]" in output.getvalue()
