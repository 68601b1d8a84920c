"""
MongoDB connection using Motor (async driver).
Connects lazily on first use and shares a single connection attempt
between all concurrent callers.
"""

import asyncio
from typing import Any, Callable, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import DESCENDING

from core.config import Settings
from core.errors import DatabaseConnectionError
from core.logger import logger


def _retrieve_failure(task: asyncio.Task) -> None:
    """Consume the attempt's exception so it is not reported as unretrieved; _connect logs it."""
    if not task.cancelled():
        task.exception()


def mask_mongodb_uri(uri: str) -> str:
    """Replace the password in a MongoDB URI with asterisks for logging."""
    if "@" not in uri or "://" not in uri:
        return uri

    credentials, host = uri.rsplit("@", 1)
    scheme, userinfo = credentials.split("://", 1)
    if ":" not in userinfo:
        return uri

    user = userinfo.split(":", 1)[0]
    return f"{scheme}://{user}:****@{host}"


class MongoDB:
    """
    MongoDB connection manager.

    One instance is created per process at application startup and handed to
    every request through the application state. States:

    - uninitialized: ``db`` is None and no attempt is in flight
    - connecting: ``_connecting`` holds the single shared attempt
    - connected: ``db`` is cached and returned without I/O
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: Callable[..., Any] = AsyncIOMotorClient,
    ):
        """
        Initialize MongoDB connection manager.

        Args:
            settings: Application settings holding the connection URI
            client_factory: Callable building the driver client (injectable for tests)
        """
        self.settings = settings
        self.client_factory = client_factory
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None
        self._connecting: Optional[asyncio.Task] = None
        logger.debug("MongoDB connection manager initialized")

    @property
    def is_connected(self) -> bool:
        return self.db is not None

    async def acquire(self) -> AsyncIOMotorDatabase:
        """
        Return the connected database, connecting first if needed.

        Concurrent callers arriving while an attempt is in flight all await
        that same attempt.

        Returns:
            Connected database handle

        Raises:
            DatabaseConnectionError: If the connection attempt fails
        """
        if self.db is not None:
            logger.debug("Using existing database connection")
            return self.db

        if self._connecting is None:
            self._connecting = asyncio.ensure_future(self._connect())
            self._connecting.add_done_callback(_retrieve_failure)
        else:
            logger.debug("Waiting for in-flight MongoDB connection attempt")

        # Shielded so a cancelled request does not abort the attempt for the others
        return await asyncio.shield(self._connecting)

    async def _connect(self) -> AsyncIOMotorDatabase:
        settings = self.settings
        client = None

        try:
            logger.info(
                f"📝 Connecting to MongoDB: {mask_mongodb_uri(settings.mongodb_uri)}"
            )

            client = self.client_factory(
                settings.mongodb_uri,
                tz_aware=True,
                maxPoolSize=settings.mongodb_max_pool_size,
                minPoolSize=settings.mongodb_min_pool_size,
                serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
                connectTimeoutMS=settings.mongodb_connect_timeout_ms,
            )

            # Test connection with ping
            await client.admin.command("ping")

            db = client.get_default_database(default=settings.mongodb_database)
            self.client = client
            self.db = db

            logger.info(f"✅ New database connection established: {db.name}")
            logger.debug(
                f"Connection pool: min={settings.mongodb_min_pool_size}, "
                f"max={settings.mongodb_max_pool_size}"
            )

        except Exception as e:
            logger.error(f"❌ Database connection failed: {e}")
            if client is not None:
                client.close()
            raise DatabaseConnectionError(
                f"Failed to connect to MongoDB: {e}", cause=e
            ) from e

        except asyncio.CancelledError:
            logger.warning("⚠️ MongoDB connection attempt cancelled")
            if client is not None:
                client.close()
            raise

        finally:
            # Cleared on success and failure alike; a failed attempt must not stick
            self._connecting = None

        await self.create_indexes()
        return db

    async def create_indexes(self) -> None:
        """
        Create the index backing the newest-first listing.

        Failures are logged and ignored; the listing works without it.
        """
        try:
            collection = self.db[self.settings.mongodb_tasks_collection]
            await collection.create_index([("createdAt", DESCENDING), ("_id", DESCENDING)])
            logger.debug("✅ Created index on createdAt")

        except Exception as e:
            logger.warning(f"⚠️ Failed to create indexes: {e}")

    async def disconnect(self) -> None:
        """
        Close MongoDB connection.

        Safe to call even if not connected. An attempt still in flight is
        cancelled so it cannot store a client after shutdown.
        """
        pending = self._connecting
        if pending is not None and not pending.done():
            logger.info("📝 Cancelling in-flight MongoDB connection attempt...")
            pending.cancel()
            await asyncio.wait({pending})
            if self._connecting is pending:
                self._connecting = None

        if self.client is None:
            logger.debug("MongoDB client not initialized, nothing to disconnect")
            return

        logger.info("📝 Disconnecting from MongoDB...")
        self.client.close()
        self.client = None
        self.db = None
        logger.info("✅ Disconnected from MongoDB")

    async def health_check(self) -> bool:
        """
        Check if MongoDB connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        try:
            was_connected = self.is_connected
            await self.acquire()
            # A fresh connect has just pinged
            if was_connected:
                await self.client.admin.command("ping")
            logger.debug("✅ MongoDB health check passed")
            return True

        except Exception as e:
            logger.error(f"❌ MongoDB health check failed: {e}")
            return False
