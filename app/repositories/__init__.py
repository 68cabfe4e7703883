"""
Repositories module initialization
"""

from .category import CategoryRepository
from .product import ProductRepository
from .user import UserRepository

__all__ = [
    "CategoryRepository",
    "ProductRepository",
    "UserRepository",
]
