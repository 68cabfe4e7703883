"""
Product service containing business logic layer
"""

from typing import Any, Dict, Optional

from app.core.errors import Forbidden, InvalidArgument, NotFound
from app.core.logger import logger
from app.models.product import OwnerSummary, Product
from app.models.user import User
from app.repositories.category import CategoryRepository
from app.repositories.product import ProductRepository
from app.repositories.user import UserRepository
from app.schemas.common import ListOptions, Pagination
from app.schemas.product import ProductCreate, ProductUpdate


class ProductService:
    """Service layer for product business logic"""

    def __init__(
        self,
        repository: ProductRepository,
        categories: CategoryRepository,
        users: UserRepository,
    ):
        self.repository = repository
        self.categories = categories
        self.users = users

    async def _check_category(self, category: str, subcategory: str) -> None:
        """The subcategory must be declared by the named category"""
        found = await self.categories.get_by_name(category)
        if found is None:
            raise InvalidArgument("Category not found")
        if not found.allows(subcategory):
            raise InvalidArgument("Invalid subcategory for this category")

    async def _get_managed(self, product_id: str, user: User) -> Product:
        product = await self.get_product(product_id)
        if not user.can_manage(product.user):
            logger.warning(
                f"Denied change to product {product_id}",
                user_id=user.id,
                metadata={"event": "product_forbidden", "product_id": product_id},
            )
            raise Forbidden("Not authorized")
        return product

    async def create_product(self, data: ProductCreate, user: User) -> Product:
        """Create a product owned by the caller"""
        await self._check_category(data.category, data.subcategory)

        product = await self.repository.create(data.model_dump(by_alias=True), owner_id=user.id)

        logger.info(
            f"Created product {product.id}",
            user_id=user.id,
            metadata={"event": "create_product", "product_id": product.id},
        )
        return product

    async def get_product(self, product_id: str) -> Product:
        """Get product by ID"""
        product = await self.repository.get_by_id(product_id)
        if not product:
            raise NotFound("Product not found")
        return product

    async def list_products(
        self,
        options: ListOptions,
        category: Optional[str] = None,
        subcategory: Optional[str] = None,
        owner_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """List products with filters and populate each creator's summary"""
        page = await self.repository.list(options, category=category, subcategory=subcategory, owner_id=owner_id)
        products = page.items

        owners = await self.users.get_many_by_ids([product.user for product in products])
        for product in products:
            owner = owners.get(product.user)
            product.owner = OwnerSummary(id=owner.id, name=owner.name, email=owner.email) if owner else None

        return {
            "products": products,
            "pagination": Pagination.build(options.page, options.limit, page.total),
        }

    async def update_product(self, product_id: str, data: ProductUpdate, user: User) -> Product:
        """Update allow-listed fields; only the owner or an admin may do this"""
        current = await self._get_managed(product_id, user)
        changes = data.changes()

        if "category" in changes or "subcategory" in changes:
            await self._check_category(
                changes.get("category", current.category),
                changes.get("subcategory", current.subcategory),
            )

        product = await self.repository.update(product_id, changes)
        if not product:
            raise NotFound("Product not found")

        logger.info(
            f"Updated product {product_id}",
            user_id=user.id,
            metadata={"event": "update_product", "product_id": product_id, "fields": sorted(changes)},
        )
        return product

    async def delete_product(self, product_id: str, user: User) -> None:
        await self._get_managed(product_id, user)

        if not await self.repository.delete(product_id):
            raise NotFound("Product not found")

        logger.info(
            f"Deleted product {product_id}",
            user_id=user.id,
            metadata={"event": "delete_product", "product_id": product_id},
        )
