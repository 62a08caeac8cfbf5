# =============================================================================
# lib/mongo_client.py - MongoDB Connection Handle
# =============================================================================
# This module owns the single long-lived connection to MongoDB Atlas.
#
# The application creates one MongoConnection at startup, stores it on
# app.state, and hands it to route handlers through FastAPI dependencies.
# Nothing in here retries: a failed attempt is logged and the handle stays
# in the "failed" state until the process restarts.
#
# Usage:
#   mongo = MongoConnection(settings.mongo_uri, settings.MONGO_DB)
#   asyncio.create_task(mongo.connect())   # fire-and-forget
#   ...
#   images = mongo.collection("images")
#   await mongo.close()
# =============================================================================

from __future__ import annotations

import asyncio
import logging
from typing import Any, Literal

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)

ConnectionStatus = Literal["pending", "connecting", "connected", "failed", "closed"]


class MongoConnectionError(ApplicationError):
    """
    Raised when the database handle is used before a client exists.

    Connection failures themselves are logged, not raised.
    """

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            message,
            code="DATABASE_UNAVAILABLE",
            suggestion=suggestion or "Check MONGO_USER, MONGO_PASSWORD and MONGO_DB and restart the server",
        )


class MongoConnection:
    """
    Explicitly owned handle to one MongoDB client.

    Lifecycle:
        pending -> connecting -> connected | failed -> closed

    Readiness is a one-shot signal: `wait_until_ready()` returns True once the
    first ping succeeds and False once the attempt has failed.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        server_selection_timeout_ms: int = 30000,
    ):
        self.uri = uri
        self.database_name = database_name
        self.server_selection_timeout_ms = server_selection_timeout_ms

        self._client: AsyncMongoClient | None = None
        self._status: ConnectionStatus = "pending"
        self._error: str | None = None
        self._settled = asyncio.Event()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def status(self) -> ConnectionStatus:
        return self._status

    @property
    def error(self) -> str | None:
        """Last connection error message, if the attempt failed."""
        return self._error

    @property
    def is_ready(self) -> bool:
        return self._status == "connected"

    async def wait_until_ready(self, timeout: float | None = None) -> bool:
        """
        Wait for the connection attempt to finish.

        Args:
            timeout: Seconds to wait; None waits indefinitely

        Returns:
            True if connected, False if the attempt failed or timed out
        """
        try:
            await asyncio.wait_for(self._settled.wait(), timeout)
        except asyncio.TimeoutError:
            return False
        return self.is_ready

    # -------------------------------------------------------------------------
    # Connect / Close
    # -------------------------------------------------------------------------

    async def connect(self) -> None:
        """
        Open the client and confirm the server answers a ping.

        Logs "Database connected successfully" on success and
        "Database connection error: ..." on failure. Never raises and never
        retries, so it is safe to run as a detached task.
        """
        if self._status != "pending":
            logger.debug(f"connect() ignored, connection is {self._status}")
            return

        self._status = "connecting"
        try:
            # Constructing the client can fail too (bad URI, SRV lookup)
            self._client = AsyncMongoClient(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )
            await self._client.admin.command("ping")
        except Exception as e:
            self._status = "failed"
            self._error = str(e)
            logger.error(f"Database connection error: {e}")
        else:
            self._status = "connected"
            logger.info("Database connected successfully")
        finally:
            self._settled.set()

    async def close(self) -> None:
        """Close the client. Safe to call more than once."""
        client, self._client = self._client, None
        self._status = "closed"
        self._settled.set()
        if client is not None:
            await client.close()
            logger.info("Database connection closed")

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def client(self) -> AsyncMongoClient:
        if self._client is None:
            raise MongoConnectionError(
                f"No database client (connection is {self._status})"
            )
        return self._client

    @property
    def database(self) -> AsyncDatabase:
        """The configured database on the shared client."""
        return self.client[self.database_name]

    def collection(self, name: str) -> AsyncCollection:
        return self.database[name]

    def describe(self) -> dict[str, Any]:
        """Status summary for health checks. Never includes the URI."""
        info: dict[str, Any] = {"status": self._status, "database": self.database_name}
        if self._error:
            info["error"] = self._error[:200]
        return info
