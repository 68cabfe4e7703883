"""
API schemas for Category endpoints
"""

from typing import List

from pydantic import BaseModel, Field, StringConstraints
from typing_extensions import Annotated

CategoryName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class CategoryCreate(BaseModel):
    name: CategoryName
    subcategories: List[CategoryName] = Field(..., min_length=1)
