"""
Category controller
"""

from app.models.user import User
from app.schemas.category import CategoryCreate
from app.schemas.common import success_envelope
from app.services.category import CategoryService


async def create_category(service: CategoryService, data: CategoryCreate, user: User) -> dict:
    category = await service.create_category(data, created_by=user.id)
    return success_envelope("Category created successfully", category)


async def get_all_categories(service: CategoryService) -> dict:
    categories = await service.list_categories()
    return success_envelope("Categories retrieved successfully", categories)
