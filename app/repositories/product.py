"""
Product repository for data access layer following Repository pattern
"""

from typing import Any, Dict, Optional

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.models.base import to_object_id, utc_now
from app.models.product import Product
from app.repositories.base import BaseRepository, search_pattern
from app.schemas.common import ListOptions, Page


class ProductRepository(BaseRepository):
    """Repository for product data access operations"""

    sortable_fields = ("createdAt", "updatedAt", "name", "price")

    async def create(self, fields: Dict[str, Any], owner_id: str) -> Product:
        """Create a new product owned by the given user"""
        now = utc_now()
        doc = {
            **fields,
            "user": to_object_id(owner_id),
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            result = await self.collection.insert_one(doc)
        except PyMongoError as e:
            raise self._database_error("product creation", e)

        doc["_id"] = result.inserted_id
        return Product.from_document(doc)

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        object_id = to_object_id(product_id)
        if object_id is None:
            return None
        try:
            doc = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            raise self._database_error("product retrieval", e)
        return Product.from_document(doc) if doc else None

    async def update(self, product_id: str, fields: Dict[str, Any]) -> Optional[Product]:
        """Set the given fields; updatedAt is bumped even when fields is empty"""
        object_id = to_object_id(product_id)
        if object_id is None:
            return None
        changes = {**fields, "updatedAt": utc_now()}
        try:
            doc = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._database_error("product update", e)
        return Product.from_document(doc) if doc else None

    async def delete(self, product_id: str) -> bool:
        object_id = to_object_id(product_id)
        if object_id is None:
            return False
        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            raise self._database_error("product deletion", e)
        return result.deleted_count > 0

    async def list(
        self,
        options: ListOptions,
        category: Optional[str] = None,
        subcategory: Optional[str] = None,
        owner_id: Optional[str] = None,
    ) -> Page:
        query: Dict[str, Any] = {}
        if category:
            query["category"] = category
        if subcategory:
            query["subcategory"] = subcategory
        if owner_id:
            query["user"] = to_object_id(owner_id)
        if options.search and options.search.strip():
            pattern = search_pattern(options.search)
            query["$or"] = [{"name": pattern}, {"description": pattern}]
        docs, total = await self._find_page(query, options)
        return Page(items=[Product.from_document(doc) for doc in docs], total=total)
