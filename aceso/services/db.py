# async mongodb client for the mongodb entry store
# uses motor for non-blocking operations

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from aceso.config import settings

logger = logging.getLogger(__name__)


class Database:
    """async mongodb connection manager"""

    def __init__(self, uri: Optional[str] = None, database: Optional[str] = None):
        self.uri = uri if uri is not None else settings.MONGODB_URI
        self.database = database or settings.MONGODB_DATABASE
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        """establish connection to mongodb"""
        if self.client is not None:
            return

        logger.info(f"Connecting to MongoDB database: {self.database}")
        # tz_aware so entry timestamps come back as utc-aware datetimes
        self.client = AsyncIOMotorClient(self.uri, tz_aware=True)
        self.db = self.client[self.database]

        # verify connection
        await self.client.admin.command("ping")
        logger.info("MongoDB connection established")

    async def close(self):
        """close mongodb connection"""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("MongoDB connection closed")

    # collection accessors

    @property
    def journal_entries(self):
        return self.db["journal_entries"]
