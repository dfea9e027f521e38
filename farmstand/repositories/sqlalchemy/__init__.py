"""SQLAlchemy implementations of repository interfaces."""

from .product import SqlAlchemyProductRepository

__all__ = [
    "SqlAlchemyProductRepository",
]
