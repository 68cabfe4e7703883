"""Tests for user, product and category models"""
from datetime import datetime, timezone

from bson import ObjectId

from app.models.base import normalize_document, to_object_id
from app.models.category import Category
from app.models.product import Product
from app.models.user import Role, User, UserCredentials

OWNER = "507f1f77bcf86cd799439011"
STRANGER = "507f1f77bcf86cd799439012"


def make_user(role=Role.USER, user_id=OWNER):
    return User(id=user_id, name="Alice", email="alice@example.com", role=role)


class TestRoleCapabilities:

    def test_owner_can_manage(self):
        assert make_user().can_manage(OWNER)

    def test_stranger_cannot_manage(self):
        assert not make_user(user_id=STRANGER).can_manage(OWNER)

    def test_admin_can_manage_anything(self):
        admin = make_user(Role.ADMIN, STRANGER)
        assert admin.can_manage(OWNER)
        assert admin.can_manage(None)

    def test_nobody_owns_an_orphan(self):
        assert not make_user().can_manage(None)

    def test_has_role(self):
        assert make_user().has_role(Role.USER, Role.ADMIN)
        assert not make_user().has_role(Role.ADMIN)
        assert make_user(Role.ADMIN).is_admin()

    def test_role_from_stored_string(self):
        assert User(id=OWNER, name="A", email="a@b.c", role="admin").role is Role.ADMIN


class TestDocumentMapping:

    def test_to_object_id(self):
        assert to_object_id(OWNER) == ObjectId(OWNER)
        assert to_object_id("not-an-id") is None
        assert to_object_id(None) is None

    def test_normalize_document(self):
        oid = ObjectId()
        normalized = normalize_document({"_id": oid, "user": ObjectId(OWNER), "name": "x"})
        assert normalized == {"id": str(oid), "user": OWNER, "name": "x"}

    def test_user_document_drops_password(self):
        doc = {
            "_id": ObjectId(OWNER),
            "name": "Alice",
            "email": "alice@example.com",
            "password": "$2b$hash",
            "role": "user",
            "isActive": False,
        }

        user = User.from_document(doc)

        assert user.id == OWNER
        assert user.is_active is False
        assert "password" not in user.model_dump(by_alias=True)

    def test_credentials_never_serialize_password(self):
        credentials = UserCredentials.from_document(
            {"_id": ObjectId(OWNER), "name": "Alice", "email": "a@b.c", "password": "$2b$hash"}
        )

        assert credentials.password == "$2b$hash"
        assert "password" not in credentials.model_dump()
        assert credentials.to_user().id == OWNER

    def test_product_document(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        product = Product.from_document({
            "_id": ObjectId(),
            "name": "Phone X",
            "price": 499.99,
            "imageUrl": "http://img/x.png",
            "category": "electronics",
            "subcategory": "phones",
            "user": ObjectId(OWNER),
            "createdAt": now,
            "updatedAt": now,
        })

        dumped = product.model_dump(by_alias=True, mode="json")
        assert dumped["user"] == OWNER
        assert dumped["imageUrl"] == "http://img/x.png"
        assert dumped["owner"] is None
        assert dumped["createdAt"] == "2024-01-01T00:00:00Z"

    def test_category_allows(self):
        category = Category(id=OWNER, name="electronics", subcategories=["phones", "laptops"])
        assert category.allows("phones")
        assert not category.allows("fiction")
