"""
User model and role capabilities
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import normalize_document


class Role(str, Enum):
    """Closed set of roles a user can hold"""
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    """User as stored in the users collection, without credentials"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    role: Role = Role.USER
    is_active: bool = Field(default=True, alias="isActive")
    last_login: Optional[datetime] = Field(default=None, alias="lastLogin")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        doc = normalize_document(doc)
        doc.pop("password", None)
        return cls(**doc)

    def is_admin(self) -> bool:
        """Check if user has admin role"""
        return self.role == Role.ADMIN

    def has_role(self, *roles: Role) -> bool:
        """Check if user holds one of the given roles"""
        return self.role in roles

    def can_manage(self, owner_id: Optional[str]) -> bool:
        """Owners and admins may modify a resource"""
        return self.is_admin() or (owner_id is not None and str(owner_id) == self.id)


class UserCredentials(User):
    """User loaded together with its password hash, for login only"""

    password: str = Field(exclude=True, repr=False)

    @classmethod
    def from_document(cls, doc: dict) -> "UserCredentials":
        return cls(**normalize_document(doc))

    def to_user(self) -> User:
        return User(**self.model_dump())
