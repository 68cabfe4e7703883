"""
Database module initialization
"""

from .mongodb import Database, USERS, PRODUCTS, CATEGORIES

__all__ = [
    "Database",
    "USERS",
    "PRODUCTS",
    "CATEGORIES",
]
