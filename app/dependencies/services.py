"""
Dependency injection for repositories and services
"""

from fastapi import Depends, Request

from app.core.errors import InternalError
from app.core.security import PasswordHasher, TokenCodec, get_password_hasher, get_token_codec
from app.db.mongodb import CATEGORIES, PRODUCTS, USERS, Database
from app.repositories.category import CategoryRepository
from app.repositories.product import ProductRepository
from app.repositories.user import UserRepository
from app.services.category import CategoryService
from app.services.product import ProductService
from app.services.user import UserService


def get_database(request: Request) -> Database:
    """Database context opened by the application lifespan"""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise InternalError("Database is not initialized")
    return database


def get_user_repository(
    database: Database = Depends(get_database),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserRepository:
    return UserRepository(database.collection(USERS), hasher)


def get_product_repository(database: Database = Depends(get_database)) -> ProductRepository:
    return ProductRepository(database.collection(PRODUCTS))


def get_category_repository(database: Database = Depends(get_database)) -> CategoryRepository:
    return CategoryRepository(database.collection(CATEGORIES))


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
    tokens: TokenCodec = Depends(get_token_codec),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(repository, tokens, hasher)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
    categories: CategoryRepository = Depends(get_category_repository),
    users: UserRepository = Depends(get_user_repository),
) -> ProductService:
    return ProductService(repository, categories, users)


def get_category_service(
    repository: CategoryRepository = Depends(get_category_repository),
) -> CategoryService:
    return CategoryService(repository)
