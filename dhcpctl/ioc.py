"""DI Provider dhcpctl module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import AsyncIterator, NewType

import httpx
from dishka import Provider, Scope, from_context, provide
from rich.console import Console

from dhcpctl.cli_config import CLIConfig
from dhcpctl.config import Settings
from dhcpctl.dhcp import (
    DHCPAPIRepository,
    DHCPManager,
    MacVendorLookup,
    get_dhcp_api_repository_class,
)
from dhcpctl.views import LeaseView

DHCPAPIHTTPClient = NewType("DHCPAPIHTTPClient", httpx.AsyncClient)
MacVendorsHTTPClient = NewType("MacVendorsHTTPClient", httpx.AsyncClient)


class MainProvider(Provider):
    """Provider for a single CLI invocation."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)
    cli_config = from_context(provides=CLIConfig, scope=Scope.APP)
    console = from_context(provides=Console, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def get_dhcp_api_http(
        self,
        settings: Settings,
        cli_config: CLIConfig,
    ) -> AsyncIterator[DHCPAPIHTTPClient]:
        """Get async client bound to the ISC DHCP API.

        :param Settings settings: app settings
        :param CLIConfig cli_config: api url and token
        :yield DHCPAPIHTTPClient: client with ``Authorization`` header,
            the header is omitted for an empty token
        """
        headers = (
            {"Authorization": cli_config.auth_token}
            if cli_config.auth_token
            else {}
        )
        async with httpx.AsyncClient(
            base_url=cli_config.api_url,
            headers=headers,
            timeout=settings.DHCP_API_TIMEOUT_SECONDS,
        ) as client:
            yield DHCPAPIHTTPClient(client)

    @provide(scope=Scope.APP)
    async def get_mac_vendors_http(
        self,
        settings: Settings,
    ) -> AsyncIterator[MacVendorsHTTPClient]:
        """Get async client for the MAC vendor service."""
        limits = httpx.Limits(max_connections=settings.VENDOR_MAX_CONN)
        async with httpx.AsyncClient(
            base_url=str(settings.VENDOR_API_URL),
            timeout=settings.VENDOR_LOOKUP_TIMEOUT_SECONDS,
            limits=limits,
        ) as client:
            yield MacVendorsHTTPClient(client)

    @provide(scope=Scope.APP)
    def get_dhcp_api_repository(
        self,
        client: DHCPAPIHTTPClient,
        cli_config: CLIConfig,
    ) -> DHCPAPIRepository:
        """Get ISC repository, or a stub while the url is not set."""
        return get_dhcp_api_repository_class(cli_config.api_url)(client)

    dhcp_manager = provide(DHCPManager, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_mac_vendor_lookup(
        self,
        client: MacVendorsHTTPClient,
    ) -> MacVendorLookup:
        """Get MAC vendor lookup."""
        return MacVendorLookup(client)

    lease_view = provide(LeaseView, scope=Scope.APP)
