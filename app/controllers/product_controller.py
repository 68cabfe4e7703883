"""
Product controller
"""

from typing import Optional

from app.models.user import User
from app.schemas.common import ListOptions, success_envelope
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.product import ProductService


async def create_product(service: ProductService, data: ProductCreate, user: User) -> dict:
    product = await service.create_product(data, user)
    return success_envelope("Product created successfully", product)


async def get_all_products(
    service: ProductService,
    options: ListOptions,
    category: Optional[str] = None,
    subcategory: Optional[str] = None,
    mine: bool = False,
    user: Optional[User] = None,
) -> dict:
    """
    List products. Identified callers may narrow the listing to their own
    products with mine=true; the flag is ignored for anonymous callers.
    """
    owner_id = user.id if (mine and user is not None) else None
    result = await service.list_products(options, category=category, subcategory=subcategory, owner_id=owner_id)
    return success_envelope("Products retrieved successfully", result)


async def get_product_by_id(service: ProductService, product_id: str) -> dict:
    product = await service.get_product(product_id)
    return success_envelope("Product retrieved successfully", product)


async def update_product(service: ProductService, product_id: str, data: ProductUpdate, user: User) -> dict:
    product = await service.update_product(product_id, data, user)
    return success_envelope("Product updated", product)


async def delete_product(service: ProductService, product_id: str, user: User) -> dict:
    await service.delete_product(product_id, user)
    return success_envelope("Product deleted successfully")
