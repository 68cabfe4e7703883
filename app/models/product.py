"""
Product model
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import normalize_document


class OwnerSummary(BaseModel):
    """Creator details populated into product listings"""
    id: str
    name: str
    email: str


class Product(BaseModel):
    """Product as stored in the products collection"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    price: float
    image_url: str = Field(alias="imageUrl")
    category: str
    subcategory: str
    quantity: Optional[float] = None
    user: str  # owning user id
    owner: Optional[OwnerSummary] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_document(cls, doc: dict) -> "Product":
        return cls(**normalize_document(doc))
