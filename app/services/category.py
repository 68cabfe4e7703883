"""
Category service
"""

from typing import List

from app.core.logger import logger
from app.models.category import Category
from app.repositories.category import CategoryRepository
from app.schemas.category import CategoryCreate


class CategoryService:

    def __init__(self, repository: CategoryRepository):
        self.repository = repository

    async def create_category(self, data: CategoryCreate, created_by: str) -> Category:
        # Duplicate names are accepted; product checks use the oldest match
        category = await self.repository.create(data.name, list(data.subcategories))
        logger.info(
            f"Created category {category.name}",
            user_id=created_by,
            metadata={"event": "create_category", "category_id": category.id},
        )
        return category

    async def list_categories(self) -> List[Category]:
        return await self.repository.list_all()
