"""Repository abstractions for the service layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from farmstand.schemas.product import ProductFields


@dataclass
class ProductRow:
    id: str
    name: str
    price: float
    category: str
    quantity: int


class ProductRepository(Protocol):
    """Store boundary for product documents.

    Ids that are not store identifiers raise ``InvalidIdentifierError``.
    """

    async def get_by_id(self, product_id: str) -> ProductRow | None: ...

    async def list(self, *, category: str | None = None) -> list[ProductRow]: ...

    async def add(self, fields: ProductFields) -> ProductRow: ...

    async def update(self, product_id: str, fields: ProductFields) -> ProductRow | None: ...

    async def delete(self, product_id: str) -> bool: ...
