from .config import render_config
from .globals import render_globals
from .leases import LeaseView
from .scopes import render_scope_details, render_scopes

__all__ = [
    "LeaseView",
    "render_config",
    "render_globals",
    "render_scope_details",
    "render_scopes",
]
