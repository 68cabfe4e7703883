"""
Unit tests for ProductService and CategoryService
"""

import pytest
from unittest.mock import AsyncMock, patch

from app.core.errors import Forbidden, InvalidArgument, NotFound
from app.models.category import Category
from app.models.product import Product
from app.models.user import Role, User
from app.schemas.category import CategoryCreate
from app.schemas.common import ListOptions, Page
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.category import CategoryService
from app.services.product import ProductService

OWNER_ID = "507f1f77bcf86cd799439011"
OTHER_ID = "507f1f77bcf86cd799439012"
PRODUCT_ID = "507f1f77bcf86cd799439021"


def make_product(**overrides):
    fields = {
        "id": PRODUCT_ID,
        "name": "Phone X",
        "price": 10,
        "imageUrl": "http://img/x.png",
        "category": "electronics",
        "subcategory": "phones",
        "user": OWNER_ID,
    }
    fields.update(overrides)
    return Product(**fields)


@pytest.fixture
def owner():
    return User(id=OWNER_ID, name="Alice", email="alice@example.com")


@pytest.fixture
def stranger():
    return User(id=OTHER_ID, name="Bob", email="bob@example.com")


@pytest.fixture
def admin():
    return User(id="507f1f77bcf86cd799439013", name="Admin", email="admin@example.com", role=Role.ADMIN)


@pytest.fixture
def repository():
    return AsyncMock()


@pytest.fixture
def categories():
    categories = AsyncMock()
    categories.get_by_name.return_value = Category(
        id="c1", name="electronics", subcategories=["phones", "laptops"]
    )
    return categories


@pytest.fixture
def users():
    return AsyncMock()


@pytest.fixture
def service(repository, categories, users):
    with patch("app.services.product.logger"):
        yield ProductService(repository, categories, users)


@pytest.fixture
def create_data():
    return ProductCreate.model_validate({
        "name": "Phone X",
        "price": 10,
        "imageUrl": "http://img/x.png",
        "category": "electronics",
        "subcategory": "phones",
    })


class TestCreateProduct:

    @pytest.mark.asyncio
    async def test_create_product(self, service, repository, owner, create_data):
        # Arrange
        repository.create.return_value = make_product()

        # Act
        product = await service.create_product(create_data, owner)

        # Assert
        fields = repository.create.call_args.args[0]
        assert fields["imageUrl"] == "http://img/x.png"
        assert repository.create.call_args.kwargs["owner_id"] == OWNER_ID
        assert product.id == PRODUCT_ID

    @pytest.mark.asyncio
    async def test_unknown_category_writes_nothing(self, service, repository, categories, owner, create_data):
        categories.get_by_name.return_value = None

        with pytest.raises(InvalidArgument) as exc_info:
            await service.create_product(create_data, owner)
        assert exc_info.value.message == "Category not found"
        repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_foreign_subcategory_writes_nothing(self, service, repository, owner, create_data):
        create_data.subcategory = "fiction"

        with pytest.raises(InvalidArgument) as exc_info:
            await service.create_product(create_data, owner)
        assert exc_info.value.message == "Invalid subcategory for this category"
        repository.create.assert_not_called()


class TestGetAndList:

    @pytest.mark.asyncio
    async def test_missing_product(self, service, repository):
        repository.get_by_id.return_value = None

        with pytest.raises(NotFound) as exc_info:
            await service.get_product(PRODUCT_ID)
        assert exc_info.value.message == "Product not found"

    @pytest.mark.asyncio
    async def test_list_populates_owners(self, service, repository, users, owner):
        repository.list.return_value = Page(
            items=[make_product(), make_product(id="p2", user=OTHER_ID)], total=2
        )
        users.get_many_by_ids.return_value = {OWNER_ID: owner}

        result = await service.list_products(ListOptions(), category="electronics")

        first, second = result["products"]
        assert first.owner.email == "alice@example.com"
        assert second.owner is None
        assert result["pagination"].total_items == 2
        repository.list.assert_called_once()
        assert repository.list.call_args.kwargs["category"] == "electronics"


class TestUpdateAndDelete:

    @pytest.mark.asyncio
    async def test_owner_update(self, service, repository, owner):
        repository.get_by_id.return_value = make_product()
        repository.update.return_value = make_product(price=12)

        product = await service.update_product(PRODUCT_ID, ProductUpdate(price=12), owner)

        repository.update.assert_called_once_with(PRODUCT_ID, {"price": 12})
        assert product.price == 12

    @pytest.mark.asyncio
    async def test_stranger_is_forbidden(self, service, repository, stranger):
        repository.get_by_id.return_value = make_product()

        with pytest.raises(Forbidden):
            await service.update_product(PRODUCT_ID, ProductUpdate(price=1), stranger)
        with pytest.raises(Forbidden):
            await service.delete_product(PRODUCT_ID, stranger)
        repository.update.assert_not_called()
        repository.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_admin_may_update(self, service, repository, admin):
        repository.get_by_id.return_value = make_product()
        repository.update.return_value = make_product(name="Renamed")

        product = await service.update_product(PRODUCT_ID, ProductUpdate(name="Renamed"), admin)

        assert product.user == OWNER_ID

    @pytest.mark.asyncio
    async def test_subcategory_change_is_checked_against_current_category(self, service, repository, owner):
        repository.get_by_id.return_value = make_product()

        with pytest.raises(InvalidArgument):
            await service.update_product(PRODUCT_ID, ProductUpdate(subcategory="fiction"), owner)
        repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_unrelated_update_skips_category_check(self, service, repository, categories, owner):
        repository.get_by_id.return_value = make_product()
        repository.update.return_value = make_product(name="New")

        await service.update_product(PRODUCT_ID, ProductUpdate(name="New"), owner)

        categories.get_by_name.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete(self, service, repository, owner):
        repository.get_by_id.return_value = make_product()
        repository.delete.return_value = True

        await service.delete_product(PRODUCT_ID, owner)

        repository.delete.assert_called_once_with(PRODUCT_ID)


class TestCategoryService:

    @pytest.mark.asyncio
    async def test_create_and_list(self):
        repository = AsyncMock()
        category = Category(id="c1", name="garden", subcategories=["tools"])
        repository.create.return_value = category
        repository.list_all.return_value = [category]

        with patch("app.services.category.logger"):
            service = CategoryService(repository)
            created = await service.create_category(CategoryCreate(name="garden", subcategories=["tools"]), "u1")
            listed = await service.list_categories()

        repository.create.assert_called_once_with("garden", ["tools"])
        assert created is category
        assert listed == [category]
