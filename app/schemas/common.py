"""
Schemas shared by every endpoint: response envelope and pagination
"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import config


class ListOptions(BaseModel):
    """Paging, sorting and search options for collection listings"""
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=config.default_page_size, ge=1, le=config.max_page_size)
    sort: str = "-createdAt"
    search: Optional[str] = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def sort_field(sort: Optional[str]) -> str:
    """Field name of a "field" / "-field" sort key"""
    return (sort or "-createdAt").strip().lstrip("-+")


class Pagination(BaseModel):
    """Pagination summary returned next to a page of documents"""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_items: int = Field(alias="totalItems")
    has_next: bool = Field(alias="hasNext")
    has_prev: bool = Field(alias="hasPrev")

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(
            current_page=page,
            total_pages=math.ceil(total / limit) if limit else 0,
            total_items=total,
            has_next=page * limit < total,
            has_prev=page > 1,
        )


class Page(BaseModel):
    """A page of results as returned by repositories"""
    items: List[Any]
    total: int


class SuccessResponse(BaseModel):
    """Envelope for successful responses"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[Any] = None


def success_envelope(message: Optional[str] = None, data: Any = None) -> dict:
    """Build the uniform success envelope; models inside data are dumped by alias"""
    body = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = _dump(data)
    return body


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_dump(item) for item in value]
    return value
