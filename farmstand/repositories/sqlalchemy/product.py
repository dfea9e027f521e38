"""SQLAlchemy implementation of the product repository."""

from __future__ import annotations

import re

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from farmstand.core.exceptions import InvalidIdentifierError
from farmstand.models import Product
from farmstand.repositories.interfaces import ProductRepository, ProductRow
from farmstand.schemas.product import ProductFields

_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def _checked_id(product_id: str) -> str:
    if not isinstance(product_id, str) or not _ID_PATTERN.match(product_id):
        raise InvalidIdentifierError(str(product_id))
    return product_id


def _to_row(product: Product) -> ProductRow:
    return ProductRow(
        id=product.id,
        name=product.name,
        price=product.price,
        category=product.category,
        quantity=product.quantity,
    )


def _column_values(fields: ProductFields) -> dict:
    return {
        "name": fields.name,
        "price": fields.price,
        "category": fields.category.value,
        "quantity": fields.quantity,
    }


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, product_id: str) -> ProductRow | None:
        product = await self._session.get(Product, _checked_id(product_id))
        return _to_row(product) if product is not None else None

    async def list(self, *, category: str | None = None) -> list[ProductRow]:
        stmt = select(Product)
        if category:
            stmt = stmt.where(Product.category == category)
        stmt = stmt.order_by(Product.created_at.asc(), Product.name.asc())
        rows = await self._session.execute(stmt)
        return [_to_row(p) for p in rows.scalars().all()]

    async def add(self, fields: ProductFields) -> ProductRow:
        product = Product(**_column_values(fields))
        self._session.add(product)
        await self._session.flush()
        return _to_row(product)

    async def update(self, product_id: str, fields: ProductFields) -> ProductRow | None:
        product = await self._session.get(Product, _checked_id(product_id))
        if product is None:
            return None
        for key, value in _column_values(fields).items():
            setattr(product, key, value)
        await self._session.flush()
        return _to_row(product)

    async def delete(self, product_id: str) -> bool:
        stmt = delete(Product).where(Product.id == _checked_id(product_id))
        result = await self._session.execute(stmt)
        return bool(result.rowcount)
