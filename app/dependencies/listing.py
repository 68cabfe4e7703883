"""
Query parameter parsing for paginated listings

The sort key is checked here against the listed entity's sortable fields, so
repositories only ever receive sort keys they can use.
"""

from typing import Callable, Iterable, Optional

from fastapi import Query

from app.core.config import config
from app.core.errors import ValidationFailed
from app.repositories.product import ProductRepository
from app.repositories.user import UserRepository
from app.schemas.common import ListOptions, sort_field


def listing_options(sortable_fields: Iterable[str]) -> Callable[..., ListOptions]:
    """Build a dependency parsing listing query parameters for one entity"""
    allowed = tuple(sortable_fields)

    def list_options(
        page: int = Query(1, ge=1, description="Page number, starting at 1"),
        limit: int = Query(
            config.default_page_size, ge=1, le=config.max_page_size, description="Items per page"
        ),
        sort: str = Query(
            "-createdAt",
            description=f"Sort key, one of {', '.join(allowed)}; prefix with '-' for descending",
        ),
        search: Optional[str] = Query(None, description="Case-insensitive substring search"),
    ) -> ListOptions:
        field = sort_field(sort)
        if field not in allowed:
            raise ValidationFailed(errors=[{"field": "sort", "message": f"Cannot sort by '{field}'"}])
        return ListOptions(page=page, limit=limit, sort=sort, search=search)

    return list_options


user_list_options = listing_options(UserRepository.sortable_fields)
product_list_options = listing_options(ProductRepository.sortable_fields)
