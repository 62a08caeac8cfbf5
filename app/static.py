# =============================================================================
# app/static.py - Public Directory Serving
# =============================================================================
# Files under PUBLIC_DIR are served before any route group sees the request.
# A GET/HEAD whose path names an existing file is answered by Starlette's
# StaticFiles; every other request continues to the routers.
#
# Directories are never served (no index.html lookup), so "/" always
# reaches the site group.
# =============================================================================

import logging
import os
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)


def public_file(root: Path, url_path: str) -> str | None:
    """
    Map a URL path to a file inside the public directory.

    Args:
        root: Resolved public directory
        url_path: Decoded request path, e.g. "/css/style.css"

    Returns:
        The path relative to root, or None if no such file exists there
    """
    relative = url_path.lstrip("/")
    if not relative:
        return None

    try:
        candidate = (root / relative).resolve()
        if not candidate.is_relative_to(root) or not candidate.is_file():
            return None
    except (ValueError, OSError):
        # NUL bytes, over-long names and the like are never files here
        return None
    return os.path.relpath(candidate, root)


def add_public_assets(app: FastAPI, directory: Path) -> None:
    """
    Register the static file middleware on an app.

    Args:
        app: FastAPI application instance
        directory: Directory whose files are served at the URL root
    """
    root = Path(directory).resolve()
    if not root.is_dir():
        logger.warning(f"Public directory {root} does not exist, nothing will be served from it")

    static = StaticFiles(directory=root, check_dir=False)

    @app.middleware("http")
    async def serve_public_assets(request: Request, call_next):
        """Answer from the public directory when the path is a file there."""
        if request.method in ("GET", "HEAD"):
            relative = public_file(root, request.url.path)
            if relative is not None:
                return await static.get_response(relative, request.scope)
        return await call_next(request)
