"""Retorts for ISC DHCP API and vendor service payloads.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from adaptix import NameStyle, Retort, name_mapping

from .dataclasses import (
    DHCPGlobalOptions,
    DHCPGlobals,
    DHCPLease,
    DHCPScope,
    DHCPScopeOptions,
    DHCPScopeRange,
)

base_retort = Retort()

dhcp_api_retort = base_retort.extend(
    recipe=[
        name_mapping(DHCPLease, name_style=NameStyle.LOWER_KEBAB),
        name_mapping(DHCPScope, name_style=NameStyle.LOWER_KEBAB),
        name_mapping(DHCPScopeRange, name_style=NameStyle.LOWER_KEBAB),
        name_mapping(DHCPScopeOptions, name_style=NameStyle.LOWER_KEBAB),
        name_mapping(DHCPGlobals, name_style=NameStyle.LOWER_KEBAB),
        name_mapping(DHCPGlobalOptions, name_style=NameStyle.LOWER_KEBAB),
    ],
)
