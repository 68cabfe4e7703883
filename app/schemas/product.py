"""
API schemas for Product endpoints
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from typing_extensions import Annotated

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ProductCreate(BaseModel):
    """Schema for creating a new product"""

    model_config = ConfigDict(populate_by_name=True)

    name: RequiredText
    description: Optional[str] = Field(None, max_length=500)
    price: float = Field(..., ge=0)
    image_url: RequiredText = Field(..., alias="imageUrl")
    category: RequiredText
    subcategory: RequiredText
    quantity: Optional[float] = Field(None, ge=0)


class ProductUpdate(BaseModel):
    """Schema for updating a product; only these fields can change"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[RequiredText] = None
    description: Optional[str] = Field(None, max_length=500)
    price: Optional[float] = Field(None, ge=0)
    image_url: Optional[RequiredText] = Field(None, alias="imageUrl")
    category: Optional[RequiredText] = None
    subcategory: Optional[RequiredText] = None
    quantity: Optional[float] = Field(None, ge=0)

    def changes(self) -> dict:
        """Fields explicitly provided with a value, keyed by document name"""
        return {
            key: value
            for key, value in self.model_dump(by_alias=True, exclude_unset=True).items()
            if value is not None
        }
