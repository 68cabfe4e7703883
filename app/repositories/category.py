"""
Category repository
"""

from typing import List, Optional

from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from app.models.base import utc_now
from app.models.category import Category
from app.repositories.base import BaseRepository


class CategoryRepository(BaseRepository):

    async def create(self, name: str, subcategories: List[str]) -> Category:
        now = utc_now()
        doc = {
            "name": name,
            "subcategories": subcategories,
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            result = await self.collection.insert_one(doc)
        except PyMongoError as e:
            raise self._database_error("category creation", e)

        doc["_id"] = result.inserted_id
        return Category.from_document(doc)

    async def get_by_name(self, name: str) -> Optional[Category]:
        """First category with this name; names are not unique"""
        try:
            doc = await self.collection.find_one({"name": name}, sort=[("createdAt", ASCENDING)])
        except PyMongoError as e:
            raise self._database_error("category retrieval", e)
        return Category.from_document(doc) if doc else None

    async def list_all(self) -> List[Category]:
        try:
            docs = await self.collection.find({}).sort("name", ASCENDING).to_list(length=None)
        except PyMongoError as e:
            raise self._database_error("category listing", e)
        return [Category.from_document(doc) for doc in docs]
