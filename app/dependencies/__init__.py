"""
Dependencies module initialization
"""

from .auth import get_current_user, get_optional_user, require_admin, require_roles
from .listing import listing_options, product_list_options, user_list_options
from .services import (
    get_category_repository,
    get_category_service,
    get_database,
    get_product_repository,
    get_product_service,
    get_user_repository,
    get_user_service,
)

__all__ = [
    "get_current_user",
    "get_optional_user",
    "require_admin",
    "require_roles",
    "listing_options",
    "product_list_options",
    "user_list_options",
    "get_category_repository",
    "get_category_service",
    "get_database",
    "get_product_repository",
    "get_product_service",
    "get_user_repository",
    "get_user_service",
]
