"""Test main config.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import io
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from rich.console import Console

from dhcpctl.dhcp.dataclasses import DHCPLease

LeaseFactory = Callable[..., DHCPLease]


def lease_payload(**overrides: Any) -> dict[str, Any]:
    """Build lease as returned by the ISC DHCP API."""
    payload = {
        "binding-state": "active",
        "client-hostname": "iphone-anna",
        "cltt": "2023-05-01T10:15:30Z",
        "ends": "2023-05-01T22:15:30Z",
        "hardware-ethernet": "a8:5e:45:33:44:55",
        "ip": "10.3.0.120",
        "next-binding-state": "free",
        "rewind-binding-state": "free",
        "set-vendor-class-identifier": "MSFT 5.0",
        "starts": "2023-05-01T10:15:30Z",
        "uid": "01:a8:5e:45:33:44:55",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_lease() -> LeaseFactory:
    """Get lease factory."""

    def factory(**overrides: Any) -> DHCPLease:
        fields = {
            "binding_state": "active",
            "cltt": "2023-05-01T10:15:30Z",
            "starts": "2023-05-01T10:15:30Z",
            "ends": "2023-05-01T22:15:30Z",
            "hardware_ethernet": "a8:5e:45:33:44:55",
            "ip": "10.3.0.120",
            "client_hostname": "iphone-anna",
            "set_vendor_class_identifier": "MSFT 5.0",
        }
        fields.update(overrides)
        return DHCPLease(**fields)

    return factory


@pytest.fixture
def output() -> io.StringIO:
    """Get captured console output."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Get wide console without colors writing to ``output``."""
    return Console(file=output, width=200, color_system=None)


class RecordingTransport(httpx.MockTransport):
    """Mock transport keeping every handled request."""

    def __init__(self, handler: Callable) -> None:
        """Wrap handler to record requests."""
        self.requests: list[httpx.Request] = []

        async def recording_handler(request: httpx.Request) -> Any:
            self.requests.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        super().__init__(recording_handler)

    @property
    def paths(self) -> list[str]:
        """Get requested paths."""
        return [request.url.path for request in self.requests]
