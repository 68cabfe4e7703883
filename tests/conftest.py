"""Shared test fixtures"""
import os

# Settings are read at import time
os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_TO_FILE"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.core.security import get_password_hasher, get_token_codec
from app.dependencies.services import (
    get_category_repository,
    get_product_repository,
    get_user_repository,
)
from app.models.user import Role
from main import app
from tests.fakes import FakeCategoryRepository, FakeProductRepository, FakeUserRepository

USER_ID = "507f1f77bcf86cd799439011"
OTHER_USER_ID = "507f1f77bcf86cd799439012"
PRODUCT_ID = "507f1f77bcf86cd799439021"


@pytest.fixture
def hasher():
    return get_password_hasher()


@pytest.fixture
def token_codec():
    return get_token_codec()


@pytest.fixture
def user_repository(hasher):
    return FakeUserRepository(hasher)


@pytest.fixture
def category_repository():
    repository = FakeCategoryRepository()
    repository.add_category("electronics", ["phones", "laptops"])
    repository.add_category("books", ["fiction"])
    return repository


@pytest.fixture
def product_repository():
    return FakeProductRepository()


@pytest.fixture
def client(user_repository, product_repository, category_repository):
    """TestClient wired to in-memory repositories; the lifespan is not entered"""
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    app.dependency_overrides[get_product_repository] = lambda: product_repository
    app.dependency_overrides[get_category_repository] = lambda: category_repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice(user_repository):
    return user_repository.add_user("Alice Smith", "alice@example.com", "Password123")


@pytest.fixture
def bob(user_repository):
    return user_repository.add_user("Bob Jones", "bob@example.com", "Password123")


@pytest.fixture
def admin(user_repository):
    return user_repository.add_user("Admin", "admin@example.com", "Admin12345", role=Role.ADMIN)


def bearer(token_codec, user) -> dict:
    return {"Authorization": f"Bearer {token_codec.issue(user.id)}"}


@pytest.fixture
def alice_headers(token_codec, alice):
    return bearer(token_codec, alice)


@pytest.fixture
def bob_headers(token_codec, bob):
    return bearer(token_codec, bob)


@pytest.fixture
def admin_headers(token_codec, admin):
    return bearer(token_codec, admin)
