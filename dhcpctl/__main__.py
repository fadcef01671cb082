"""Main dhcpctl module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence

from dishka import make_async_container
from loguru import logger
from rich.console import Console
from rich.text import Text

from dhcpctl.cli_config import CLIConfig, CLIConfigStore
from dhcpctl.config import Settings
from dhcpctl.dhcp import DHCPCtlError, DHCPManager
from dhcpctl.ioc import MainProvider
from dhcpctl.views import (
    LeaseView,
    render_config,
    render_globals,
    render_scope_details,
    render_scopes,
)


def build_parser() -> argparse.ArgumentParser:
    """Build dhcpctl argument parser."""
    parser = argparse.ArgumentParser(
        prog="dhcpctl",
        description="Read only client for the ISC DHCP REST API.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    set_parser = commands.add_parser("set", help="Set CLI configuration.")
    set_types = set_parser.add_subparsers(dest="action", required=True)
    set_config = set_types.add_parser("config", help="Set configuration")
    set_config.add_argument(
        "-u",
        "--url",
        help="Set the URL of the ISC DHCP API.",
    )
    set_config.add_argument(
        "-t",
        "--token",
        help=(
            "API authentication token. This will be added as a header "
            "eg. 'authorization: xxxxx'"
        ),
    )

    get_parser = commands.add_parser("get", help="Get CLI configuration.")
    get_types = get_parser.add_subparsers(dest="action", required=True)
    get_types.add_parser("config", help="Show configuration")

    commands.add_parser("globals", help="Get global configuration.")

    scopes_parser = commands.add_parser("scopes", help="Get DHCP scopes.")
    scope_types = scopes_parser.add_subparsers(dest="action", required=True)
    scopes_list = scope_types.add_parser("list", help="List all scopes.")
    scopes_list.add_argument(
        "-p",
        "--pxe",
        action="store_true",
        help="Include PXE options.",
    )
    scopes_list.add_argument(
        "-d",
        "--dns",
        action="store_true",
        help="Include DNS servers.",
    )
    scopes_get = scope_types.add_parser(
        "get",
        help="Get a specific scope.",
    )
    scopes_get.add_argument("subnet_id", help="The network ID of the scope.")

    leases_parser = commands.add_parser("leases", help="Get leases.")
    lease_types = leases_parser.add_subparsers(dest="action", required=True)
    leases_list = lease_types.add_parser(
        "list",
        help="List all active leases.",
    )
    leases_list.add_argument(
        "cidr",
        nargs="?",
        default="",
        help="Specific CIDR or IP, eg. 10.3.0.0/24 or 10.3.0.120",
    )
    leases_search = lease_types.add_parser(
        "search",
        help=(
            "Search for leases in the 'client-hostname', "
            "'hardware-ethernet' and 'set-vendor-class-identifier' "
            "properties."
        ),
    )
    leases_search.add_argument("string", help="The string to search for.")

    for lease_parser in (leases_list, leases_search):
        lease_parser.add_argument(
            "-m",
            "--mac-lookup",
            action="store_true",
            help="Look up MAC address vendors on macvendors.co.",
        )

    return parser


def setup_logging(debug: bool) -> None:
    """Log to stderr in debug mode only, errors are reported by main."""
    logger.remove()
    if debug:
        logger.add(sys.stderr, level="DEBUG")


async def run_command(
    args: argparse.Namespace,
    settings: Settings,
    cli_config: CLIConfig,
    console: Console,
) -> None:
    """Run a command needing the DHCP API."""
    container = make_async_container(
        MainProvider(),
        context={
            Settings: settings,
            CLIConfig: cli_config,
            Console: console,
        },
    )

    try:
        match (args.command, getattr(args, "action", None)):
            case ("globals", _):
                manager = await container.get(DHCPManager)
                render_globals(console, await manager.get_globals())

            case ("scopes", "list"):
                manager = await container.get(DHCPManager)
                render_scopes(
                    console,
                    await manager.get_scopes(),
                    pxe=args.pxe,
                    dns=args.dns,
                )

            case ("scopes", "get"):
                manager = await container.get(DHCPManager)
                render_scope_details(
                    console,
                    await manager.get_scope(args.subnet_id),
                )

            case ("leases", "list"):
                manager = await container.get(DHCPManager)
                view = await container.get(LeaseView)
                await view.render(
                    await manager.list_leases(args.cidr),
                    mac_lookup=args.mac_lookup,
                )

            case ("leases", "search"):
                manager = await container.get(DHCPManager)
                view = await container.get(LeaseView)
                await view.render(
                    await manager.search_leases(args.string),
                    mac_lookup=args.mac_lookup,
                )

            case _:
                raise ValueError(f"Unknown command {args.command}")
    finally:
        await container.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run dhcpctl, return process exit status."""
    args = build_parser().parse_args(argv)
    settings = Settings.from_os()
    setup_logging(args.verbose or settings.DEBUG)

    console = Console()
    err_console = Console(stderr=True)
    store = CLIConfigStore(settings.CONFIG_PATH)

    try:
        if args.command == "set":
            store.update(api_url=args.url, auth_token=args.token)
            return 0

        cli_config = store.ensure_exists()

        if args.command == "get":
            render_config(console, cli_config)
            return 0

        asyncio.run(run_command(args, settings, cli_config, console))

    except DHCPCtlError as err:
        logger.debug(f"{type(err).__name__} code={err.code!r}")
        err_console.print(Text(str(err), style="red"))
        return err.exit_status

    return 0


if __name__ == "__main__":
    sys.exit(main())
