"""
Services module initialization
"""

from .category import CategoryService
from .product import ProductService
from .user import UserService

__all__ = [
    "CategoryService",
    "ProductService",
    "UserService",
]
