"""DHCP client constants.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re

MAC_PREFIX_LENGTH = 8
LOCALLY_ADMINISTERED_MARKERS = frozenset("26ae")

RANDOMIZED_VENDOR = "::randomized::"
UNKNOWN_VENDOR = "unknown"

TIMESTAMP_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

GLOBALS_PATH = "/config/globals"
SCOPES_PATH = "/config/scopes"
LEASES_PATH = "/leases/"
LEASES_SEARCH_PATH = "/leases/search/"

RFC3339_TIMESTAMP_RE = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}[T ][0-9]{2}:[0-9]{2}:[0-9]{2}"
    r"(\.[0-9]+)?(Z|[+-][0-9]{2}:[0-9]{2})",
)
CIDR_PREFIX_LENGTH_RE = re.compile(r"[0-9]{1,2}")
