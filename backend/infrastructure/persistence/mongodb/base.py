"""Base MongoDB repository with reusable patterns.

Provides common functionality for the user directory collections:
- Connection management (shared motor client)
- Document mapping hooks (domain <-> MongoDB)
- Error logging around every datastore call

Datastore errors are logged with collection and filter, then re-raised
unmodified.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TypeVar, Generic, Optional, Dict, Any, List, Tuple
import logging
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from infrastructure.config import get_mongodb_uri, get_mongodb_database


TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoFollowRepository(MongoBaseRepository[Follow]):
            @property
            def collection_name(self) -> str:
                return "follows"
            ...
    """

    def __init__(
        self,
        client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None,
        database_name: Optional[str] = None,
    ):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
            database_name: Database name (defaults to MONGODB_DATABASE)
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
        else:
            self._client = client

        self._db = self._client[database_name or get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        return self._collection

    @staticmethod
    def as_utc(dt: datetime) -> datetime:
        """
        Attach UTC to datetimes read back from BSON.

        The driver returns naive datetimes (UTC) unless the client is
        created with tz_aware=True.
        """
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
    ) -> Optional[Dict[str, Any]]:
        try:
            doc = await self._collection.find_one(filter_dict, projection)
            return doc
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents.

        Args:
            filter_dict: MongoDB filter
            sort: Sort specification [(field, direction), ...]
            limit: Max documents to return
        """
        try:
            cursor = self._collection.find(filter_dict)

            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)

            documents = await cursor.to_list(length=limit)
            return documents
        except Exception as e:
            logger.error(
                f"Error in find_many: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        try:
            await self._collection.insert_one(document)
        except Exception as e:
            logger.error(f"Error in insert_one: collection={self.collection_name}, " f"error={e}")
            raise

    async def _update_one(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
    ) -> int:
        """
        Update single document.

        Args:
            filter_dict: MongoDB filter
            update_dict: Update operations (e.g., {"$set": {...}}, {"$inc": {...}})

        Returns:
            Number of documents matched (0 or 1)
        """
        try:
            result = await self._collection.update_one(filter_dict, update_dict)
            return result.matched_count
        except Exception as e:
            logger.error(
                f"Error in update_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document.

        Returns:
            Number of documents deleted (0 or 1)
        """
        try:
            result = await self._collection.delete_one(filter_dict)
            return result.deleted_count
        except Exception as e:
            logger.error(
                f"Error in delete_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info(f"Closed connection for {self.__class__.__name__}")
