"""
Base repository for MongoDB data access

Holds the paging/sorting logic shared by the collection-specific repositories
and the translation of driver errors into application errors.
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Tuple

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from app.core.errors import InternalError
from app.core.logger import logger
from app.schemas.common import ListOptions, sort_field


def parse_sort(sort: Optional[str], allowed: Iterable[str]) -> List[Tuple[str, int]]:
    """
    Turn "field" / "-field" into a pymongo sort list.

    Sort keys are checked against the sortable fields when the request is
    parsed; an unknown field here is a programming error.

    Raises:
        ValueError: if the field is not sortable
    """
    field = sort_field(sort)
    direction = DESCENDING if (sort or "-createdAt").strip().startswith("-") else ASCENDING
    if field not in allowed:
        raise ValueError(f"Cannot sort by '{field}'")
    order = [(field, direction)]
    if field != "_id":
        # Tie-breaker keeps paging stable for equal keys
        order.append(("_id", direction))
    return order


def search_pattern(text: str) -> Dict[str, str]:
    """Case-insensitive substring match on literal text"""
    return {"$regex": re.escape(text.strip()), "$options": "i"}


class BaseRepository:
    """Common behaviour for collection repositories"""

    sortable_fields: Tuple[str, ...] = ("createdAt", "updatedAt")

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    def _database_error(self, action: str, error: PyMongoError) -> InternalError:
        logger.error(
            f"MongoDB error during {action}",
            error=error,
            metadata={"event": "database_error", "action": action},
        )
        return InternalError(f"Database error during {action}")

    async def _find_page(
        self,
        query: Dict[str, Any],
        options: ListOptions,
        projection: Optional[Dict[str, int]] = None,
    ) -> Tuple[List[dict], int]:
        """Fetch one page of documents plus the total count for the query"""
        sort = parse_sort(options.sort, self.sortable_fields)
        try:
            cursor = (
                self.collection.find(query, projection)
                .sort(sort)
                .skip(options.skip)
                .limit(options.limit)
            )
            docs = await cursor.to_list(length=options.limit)
            total = await self.collection.count_documents(query)
        except PyMongoError as e:
            raise self._database_error("listing", e)
        return docs, total
