"""
Category model
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import normalize_document


class Category(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    subcategories: List[str]
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_document(cls, doc: dict) -> "Category":
        return cls(**normalize_document(doc))

    def allows(self, subcategory: str) -> bool:
        return subcategory in self.subcategories
