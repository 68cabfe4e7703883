"""
MongoDB connection context

The Database object is created once per application in the lifespan handler
and handed to repositories explicitly; there is no module-level connection.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from app.core.errors import InternalError
from app.core.logger import logger

USERS = "users"
PRODUCTS = "products"
CATEGORIES = "categories"


class Database:
    """Database connection manager with an explicit connect/close lifecycle"""

    def __init__(self, url: str, name: str):
        self.url = url
        self.name = name
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self.database is not None

    async def connect(self) -> None:
        """Open the client, verify it with a ping and make sure indexes exist"""
        logger.info("Connecting to MongoDB...")

        try:
            self.client = AsyncIOMotorClient(self.url)
            self.database = self.client[self.name]
            await self.client.admin.command("ping")
            await self.ensure_indexes()
        except PyMongoError as e:
            logger.error(
                f"Could not connect to MongoDB: {e}",
                metadata={"event": "mongodb_connection_error", "error": str(e)},
            )
            raise InternalError(f"Could not connect to MongoDB: {e}", status_code=503)

        logger.info(
            f"Successfully connected to MongoDB database '{self.name}'",
            metadata={"event": "mongodb_connected", "database": self.name},
        )

    async def close(self) -> None:
        logger.info("Closing connection to MongoDB...")
        if self.client is not None:
            self.client.close()
        self.client = None
        self.database = None

    async def ping(self) -> bool:
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError:
            return False

    def collection(self, name: str) -> AsyncIOMotorCollection:
        if self.database is None:
            raise InternalError("Database is not initialized")
        return self.database[name]

    async def ensure_indexes(self) -> None:
        """Create the indexes the services rely on"""
        users = self.collection(USERS)
        # Authoritative guard against duplicate registrations
        await users.create_index([("email", ASCENDING)], unique=True, name="idx_email_unique")
        await users.create_index([("createdAt", DESCENDING)], name="idx_users_created")

        products = self.collection(PRODUCTS)
        await products.create_index([("createdAt", DESCENDING)], name="idx_products_created")
        await products.create_index(
            [("category", ASCENDING), ("subcategory", ASCENDING)],
            name="idx_category_subcategory",
        )
        await products.create_index([("user", ASCENDING)], name="idx_products_owner")

        categories = self.collection(CATEGORIES)
        await categories.create_index([("name", ASCENDING)], name="idx_category_name")

        logger.info("MongoDB indexes ensured", metadata={"event": "indexes_ensured"})
