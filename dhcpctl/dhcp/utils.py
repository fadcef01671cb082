"""Utils for DHCP API client.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import functools
from datetime import datetime
from typing import Any, Callable

from loguru import logger as loguru_logger

from .constants import (
    LOCALLY_ADMINISTERED_MARKERS,
    MAC_PREFIX_LENGTH,
    RFC3339_TIMESTAMP_RE,
    TIMESTAMP_DISPLAY_FORMAT,
)
from .exceptions import DHCPCtlError, TimestampParseError

log = loguru_logger.bind(name="DHCPAPI")


def logger_wraps(is_stub: bool = False) -> Callable:
    """Log DHCP API repository calls."""

    def wrapper(func: Callable) -> Callable:
        name = func.__name__
        bus_type = " stub " if is_stub else " "

        @functools.wraps(func)
        async def wrapped(*args: Any, **kwargs: Any) -> Any:
            logger = log.opt(depth=1)

            logger.debug(f"Calling{bus_type}'{name}'")
            try:
                result = await func(*args, **kwargs)
            except DHCPCtlError as err:
                logger.error(f"{name} call raised: {err}")
                raise

            else:
                if not is_stub:
                    logger.debug(f"Executed {name}")
            return result

        return wrapped

    return wrapper


def mac_prefix(hardware_ethernet: str) -> str:
    """Get vendor lookup key of a MAC address, e.g. ``aa:bb:cc``."""
    return hardware_ethernet[:MAC_PREFIX_LENGTH].lower()


def is_locally_administered(prefix: str) -> bool:
    """Check the locally administered bit of the first octet.

    The second hex digit of such addresses is one of 2, 6, a or e.
    """
    return prefix[1:2].lower() in LOCALLY_ADMINISTERED_MARKERS


def format_timestamp(value: str) -> str:
    """Format RFC 3339 timestamp for display, keeping its own offset.

    :raises TimestampParseError: not a RFC 3339 timestamp
    """
    if not RFC3339_TIMESTAMP_RE.fullmatch(value):
        raise TimestampParseError(f"Invalid lease timestamp {value!r}")

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as err:
        raise TimestampParseError(
            f"Invalid lease timestamp {value!r}: {err}",
        ) from err

    return parsed.strftime(TIMESTAMP_DISPLAY_FORMAT)
