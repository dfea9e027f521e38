# Imported so Alembic and create_all see every table
from .base import Base
from .product import CATEGORIES, Category, Product

__all__ = [
    "Base",
    "CATEGORIES",
    "Category",
    "Product",
]
