"""Setup MongoDB indexes for the user directory collections.

Collections:
- users: one document per provisioned user
- follows: directed follow edges
- notifications: append-only notifications

Usage:
    python scripts/setup_mongodb_indexes.py

Environment Variables:
    MONGODB_URI: MongoDB connection string (required)
    MONGODB_DATABASE: Database name (default: user_directory)
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Dict, Any, List

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from infrastructure.config import get_mongodb_uri, get_mongodb_database

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


logger = logging.getLogger(__name__)

COLLECTIONS: List[str] = ["users", "follows", "notifications"]


async def create_user_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    """Create indexes for users collection.

    Indexes:
    - _id: user_id, unique (automatic)
    - clerk_id: unique, lookup by identity provider subject
    """
    collection = db["users"]
    logger.info("Creating indexes for 'users' collection...")

    await collection.create_index(
        [("clerk_id", 1)],
        name="idx_clerk_id_unique",
        unique=True,
    )
    logger.info("  Created unique index: clerk_id")


async def create_follow_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    """Create indexes for follows collection.

    Indexes:
    - follower_id + following_id: unique, one edge per ordered pair
    - following_id: reverse lookups (who follows a user)
    """
    collection = db["follows"]
    logger.info("Creating indexes for 'follows' collection...")

    await collection.create_index(
        [("follower_id", 1), ("following_id", 1)],
        name="idx_follower_following_unique",
        unique=True,
    )
    logger.info("  Created unique index: follower_id + following_id")

    await collection.create_index(
        [("following_id", 1)],
        name="idx_following",
    )
    logger.info("  Created index: following_id")


async def create_notification_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    """Create indexes for notifications collection.

    Indexes:
    - receiver_id + created_at: a user's notifications, newest first
    """
    collection = db["notifications"]
    logger.info("Creating indexes for 'notifications' collection...")

    await collection.create_index(
        [("receiver_id", 1), ("created_at", -1)],
        name="idx_receiver_created",
    )
    logger.info("  Created index: receiver_id + created_at (descending)")


async def list_existing_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    """Log all existing indexes for verification."""
    for coll_name in COLLECTIONS:
        indexes = await db[coll_name].list_indexes().to_list(length=None)

        logger.info(f"{coll_name}:")
        for idx in indexes:
            name = idx.get("name", "unknown")
            keys = idx.get("key", {})
            unique = " (unique)" if idx.get("unique", False) else ""
            keys_str = ", ".join(f"{k}:{v}" for k, v in keys.items())
            logger.info(f"  - {name}: [{keys_str}]{unique}")


async def create_all_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    await create_user_indexes(db)
    await create_follow_indexes(db)
    await create_notification_indexes(db)


async def setup_all_indexes() -> None:
    """Connect, create every index, then list what exists."""
    uri = get_mongodb_uri()
    if not uri:
        logger.error("MONGODB_URI not configured!")
        sys.exit(1)

    database_name = get_mongodb_database()
    logger.info(f"Connecting to MongoDB: {database_name}")

    client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
    db = client[database_name]

    try:
        await client.admin.command("ping")
        logger.info("Connected to MongoDB successfully")

        await create_all_indexes(db)
        logger.info("All indexes created successfully")

        await list_existing_indexes(db)

    except Exception as e:
        logger.error(f"Error setting up indexes: {e}")
        sys.exit(1)

    finally:
        client.close()
        logger.info("MongoDB connection closed")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        asyncio.run(setup_all_indexes())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
