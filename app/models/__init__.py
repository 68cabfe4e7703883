"""
Models module initialization
"""

from .category import Category
from .product import OwnerSummary, Product
from .user import Role, User, UserCredentials

__all__ = [
    "Category",
    "OwnerSummary",
    "Product",
    "Role",
    "User",
    "UserCredentials",
]
