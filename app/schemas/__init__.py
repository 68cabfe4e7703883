"""
Request and response schemas
"""

from .category import CategoryCreate
from .common import ListOptions, Page, Pagination, SuccessResponse, success_envelope
from .product import ProductCreate, ProductUpdate
from .user import UserLogin, UserProfileUpdate, UserRegister

__all__ = [
    "CategoryCreate",
    "ListOptions",
    "Page",
    "Pagination",
    "SuccessResponse",
    "success_envelope",
    "ProductCreate",
    "ProductUpdate",
    "UserLogin",
    "UserProfileUpdate",
    "UserRegister",
]
