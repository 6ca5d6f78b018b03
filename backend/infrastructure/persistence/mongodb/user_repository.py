"""MongoDB User Repository implementation."""

from typing import Optional, Any, Dict

from pymongo.errors import DuplicateKeyError

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.external_subject import ExternalSubject
from domain.user.core.ports.user_repository import (
    IUserRepository,
    validate_patch,
    validate_counter,
)
from domain.user.core.exceptions.user_errors import UserAlreadyExistsError, UserNotFoundError
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of User repository.

    Document schema (collection ``users``):
        _id: user_id (UUID string)
        clerk_id: identity provider subject (unique index)
        username, fullname, email, image, bio
        follower_count, following_count, post_count
        created_at, updated_at (BSON dates)

    Counter changes go through ``$inc`` so concurrent follow toggles on
    the same user do not lose updates.
    """

    # Entity attribute -> document key, where they differ
    _FIELD_KEYS = {"full_name": "fullname"}

    @property
    def collection_name(self) -> str:
        return "users"

    def to_document(self, entity: User) -> Dict[str, Any]:
        return {
            "_id": str(entity.user_id),
            "clerk_id": str(entity.external_subject),
            "username": entity.username,
            "fullname": entity.full_name,
            "email": entity.email,
            "image": entity.image,
            "bio": entity.bio,
            "follower_count": entity.follower_count,
            "following_count": entity.following_count,
            "post_count": entity.post_count,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    def from_document(self, doc: Dict[str, Any]) -> User:
        return User(
            user_id=UserId(doc["_id"]),
            external_subject=ExternalSubject(doc["clerk_id"]),
            username=doc["username"],
            full_name=doc["fullname"],
            email=doc["email"],
            image=doc["image"],
            bio=doc.get("bio"),
            follower_count=doc.get("follower_count", 0),
            following_count=doc.get("following_count", 0),
            post_count=doc.get("post_count", 0),
            created_at=self.as_utc(doc["created_at"]),
            updated_at=self.as_utc(doc["updated_at"]),
        )

    async def add(self, user: User) -> None:
        try:
            await self._insert_one(self.to_document(user))
        except DuplicateKeyError as e:
            raise UserAlreadyExistsError(str(user.external_subject)) from e

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        doc = await self._find_one({"_id": str(user_id)})
        return self.from_document(doc) if doc else None

    async def find_by_external_subject(self, external_subject: ExternalSubject) -> Optional[User]:
        doc = await self._find_one({"clerk_id": str(external_subject)})
        return self.from_document(doc) if doc else None

    async def patch(self, user_id: UserId, fields: Dict[str, Any]) -> None:
        validate_patch(fields)
        update = {self._FIELD_KEYS.get(name, name): value for name, value in fields.items()}
        matched = await self._update_one({"_id": str(user_id)}, {"$set": update})
        if matched == 0:
            raise UserNotFoundError(str(user_id))

    async def increment_counter(self, user_id: UserId, counter: str, delta: int) -> None:
        validate_counter(counter)
        matched = await self._update_one({"_id": str(user_id)}, {"$inc": {counter: delta}})
        if matched == 0:
            raise UserNotFoundError(str(user_id))
