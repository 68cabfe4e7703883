"""
User repository

Passwords are hashed here, right before they are written, and only when the
password is one of the fields being written.
"""

from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import Conflict
from app.core.security import PasswordHasher
from app.models.base import to_object_id, utc_now
from app.models.user import Role, User, UserCredentials
from app.repositories.base import BaseRepository, search_pattern
from app.schemas.common import ListOptions, Page

EXCLUDE_PASSWORD = {"password": 0}


class UserRepository(BaseRepository):
    """Repository for user data access operations"""

    sortable_fields = ("createdAt", "updatedAt", "name", "email")

    def __init__(self, collection: AsyncIOMotorCollection, hasher: PasswordHasher):
        super().__init__(collection)
        self.hasher = hasher

    async def _prepare(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields = dict(fields)
        if "password" in fields:
            fields["password"] = await self.hasher.hash_async(fields["password"])
        return fields

    async def create(self, name: str, email: str, password: str, role: Role = Role.USER) -> User:
        """Insert a new user; the unique email index is the final word on duplicates"""
        now = utc_now()
        doc = await self._prepare({
            "name": name,
            "email": email,
            "password": password,
            "role": role.value,
            "isActive": True,
            "lastLogin": None,
            "createdAt": now,
            "updatedAt": now,
        })
        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise Conflict("User already exists with this email")
        except PyMongoError as e:
            raise self._database_error("user creation", e)

        doc["_id"] = result.inserted_id
        return User.from_document(doc)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        try:
            doc = await self.collection.find_one({"_id": object_id}, EXCLUDE_PASSWORD)
        except PyMongoError as e:
            raise self._database_error("user retrieval", e)
        return User.from_document(doc) if doc else None

    async def get_by_email(self, email: str) -> Optional[User]:
        try:
            doc = await self.collection.find_one({"email": email.lower()}, EXCLUDE_PASSWORD)
        except PyMongoError as e:
            raise self._database_error("user retrieval", e)
        return User.from_document(doc) if doc else None

    async def get_credentials(self, email: str) -> Optional[UserCredentials]:
        """Load a user together with its password hash"""
        try:
            doc = await self.collection.find_one({"email": email.lower()})
        except PyMongoError as e:
            raise self._database_error("user retrieval", e)
        return UserCredentials.from_document(doc) if doc else None

    async def get_many_by_ids(self, user_ids: List[str]) -> Dict[str, User]:
        object_ids = [oid for oid in (to_object_id(uid) for uid in set(user_ids)) if oid is not None]
        if not object_ids:
            return {}
        try:
            cursor = self.collection.find({"_id": {"$in": object_ids}}, EXCLUDE_PASSWORD)
            docs = await cursor.to_list(length=len(object_ids))
        except PyMongoError as e:
            raise self._database_error("user retrieval", e)
        users = [User.from_document(doc) for doc in docs]
        return {user.id: user for user in users}

    async def update(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """Apply a partial update and return the updated user"""
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        changes = await self._prepare(fields)
        changes["updatedAt"] = utc_now()
        try:
            doc = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                projection=EXCLUDE_PASSWORD,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise Conflict("Email already in use")
        except PyMongoError as e:
            raise self._database_error("user update", e)
        return User.from_document(doc) if doc else None

    async def touch_last_login(self, user_id: str) -> None:
        """Record a successful login without touching any other field"""
        try:
            await self.collection.update_one(
                {"_id": to_object_id(user_id)},
                {"$set": {"lastLogin": utc_now()}},
            )
        except PyMongoError as e:
            raise self._database_error("login bookkeeping", e)

    async def delete(self, user_id: str) -> bool:
        object_id = to_object_id(user_id)
        if object_id is None:
            return False
        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            raise self._database_error("user deletion", e)
        return result.deleted_count > 0

    async def list(self, options: ListOptions) -> Page:
        query: Dict[str, Any] = {}
        if options.search and options.search.strip():
            pattern = search_pattern(options.search)
            query["$or"] = [{"name": pattern}, {"email": pattern}]
        docs, total = await self._find_page(query, options, EXCLUDE_PASSWORD)
        return Page(items=[User.from_document(doc) for doc in docs], total=total)
