# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains the two route groups the app mounts:
# - site.py: Gallery listing, uploads and health checks (mounted at "/")
# - image.py: Single-image view, rename and delete (mounted at "/image")
#
# ROUTE_GROUPS is the registry main.py mounts from. Each entry is
# (prefix, router); each router tags its own routes. Anything not under an
# earlier, more specific prefix falls through to the site group.
# =============================================================================

from fastapi import APIRouter

from . import image
from . import site

ROUTE_GROUPS: list[tuple[str, APIRouter]] = [
    ("/image", image.router),
    ("", site.router),
]

__all__ = [
    "ROUTE_GROUPS",
    "image",
    "site",
]
