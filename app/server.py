# =============================================================================
# app/server.py - HTTP Server Entry Point
# =============================================================================
# Runs the app under uvicorn on HOST:PORT (PORT defaults to 5000) and logs
# the listen URL once the socket is actually bound.
#
# A bind failure (port in use) is not handled here: uvicorn logs it and
# exits, and whatever supervises the process decides what happens next.
#
# Usage:
#   ip1-gallery
#   python -m app.server
#   PORT=8080 python -m app.server
# =============================================================================

import logging
import socket

import uvicorn

from app.config import Settings, settings
from app.main import create_app

logger = logging.getLogger(__name__)


def log_listening(app_settings: Settings, port: int | None = None) -> None:
    url = f"http://localhost:{port}" if port else app_settings.listen_url
    logger.info(f"Server is listening at {url}")


class GalleryServer(uvicorn.Server):
    """uvicorn server that announces the listen URL after binding."""

    def __init__(self, config: uvicorn.Config, app_settings: Settings):
        super().__init__(config)
        self.app_settings = app_settings

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started and not self.should_exit:
            log_listening(self.app_settings, self.bound_port())

    def bound_port(self) -> int | None:
        """Port of the first listening socket, or None before binding."""
        for server in getattr(self, "servers", []):
            for sock in server.sockets:
                return sock.getsockname()[1]
        return None


def build_server(app_settings: Settings | None = None) -> GalleryServer:
    """
    Create the server for a set of settings without starting it.

    Args:
        app_settings: Settings to use; defaults to the environment-loaded ones

    Returns:
        GalleryServer bound to app_settings.HOST / app_settings.PORT on run()
    """
    app_settings = app_settings or settings
    config = uvicorn.Config(
        create_app(app_settings),
        host=app_settings.HOST,
        port=app_settings.PORT,
        log_level="debug" if app_settings.DEBUG else "info",
    )
    return GalleryServer(config, app_settings)


def main() -> None:
    """Start the server and block until it stops."""
    server = build_server()
    server.run()


if __name__ == "__main__":
    main()
