"""MAC vendor enrichment.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import asyncio
from collections.abc import Iterable

import httpx
from adaptix.load_error import LoadError
from loguru import logger as loguru_logger

from .constants import RANDOMIZED_VENDOR, UNKNOWN_VENDOR
from .dataclasses import MacVendorResponse
from .exceptions import LookupFailedError
from .retorts import base_retort
from .utils import is_locally_administered

log = loguru_logger.bind(name="MacVendors")


class MacVendorLookup:
    """Resolve MAC prefixes to vendor names through macvendors.co.

    Methods:
    - `build_vendor_map(prefixes)`: resolve every distinct prefix. Locally
      administered prefixes are answered without a request, the others are
      looked up concurrently and awaited together. Any non-success status,
      timeout or transport error aborts the whole map with
      `LookupFailedError`.

    Attributes:
    - `LOOKUP_URL`: path template on the vendor service.
    - `client`: asynchronous HTTP client bound to the vendor service.
    """

    LOOKUP_URL = "/api/{prefix}"

    client: httpx.AsyncClient

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Set web client.

        :param httpx.AsyncClient client: client with vendor service base url
            and request timeout
        """
        self.client = client

    async def _lookup(self, prefix: str) -> tuple[str, str]:
        """Look up a single prefix.

        :param str prefix: lowercased MAC prefix
        :raises LookupFailedError: bad status, timeout or transport error
        :return tuple[str, str]: prefix and vendor name
        """
        try:
            response = await self.client.get(
                self.LOOKUP_URL.format(prefix=prefix),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as err:
            raise LookupFailedError(
                f"MAC vendor lookup failed for {prefix}: {err}",
            ) from err
        except httpx.HTTPError as err:
            raise LookupFailedError(
                f"MAC vendor lookup failed for {prefix}: "
                f"{type(err).__name__} {err}",
            ) from err

        try:
            vendor = base_retort.load(response.json(), MacVendorResponse)
        except (ValueError, LoadError):
            log.debug(f"Undecodable vendor record for {prefix}")
            return prefix, UNKNOWN_VENDOR

        return prefix, vendor.result.company

    async def build_vendor_map(
        self,
        prefixes: Iterable[str],
    ) -> dict[str, str]:
        """Build prefix to vendor name mapping.

        :param Iterable[str] prefixes: MAC prefixes, duplicates allowed
        :raises LookupFailedError: any lookup failed, no map is returned
        :return dict[str, str]: one entry per distinct lowercased prefix
        """
        vendors: dict[str, str] = {}
        pending: set[str] = set()

        for prefix in {p.lower() for p in prefixes}:
            if is_locally_administered(prefix):
                vendors[prefix] = RANDOMIZED_VENDOR
            else:
                pending.add(prefix)

        log.debug(
            f"Resolving {len(pending)} vendor prefixes, "
            f"{len(vendors)} randomized",
        )

        tasks = [asyncio.create_task(self._lookup(p)) for p in pending]
        try:
            results = await asyncio.gather(*tasks)
        except LookupFailedError:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        vendors.update(results)
        return vendors
