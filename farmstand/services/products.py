"""Product catalog operations used by the route handlers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from farmstand.core.exceptions import AppError, ProductValidationError
from farmstand.dto import ProductDTO, ProductListDTO
from farmstand.dto.mappers import map_product, writable_fields
from farmstand.infra.unit_of_work import UnitOfWork
from farmstand.logging import get_logger
from farmstand.services.validation import validate_product, validate_product_update

ALL_CATEGORIES_LABEL = "All"
NOT_FOUND_MESSAGE = "Product Not Found"

logger = get_logger(__name__)


class ProductService:
    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_products(self, category: str | None = None) -> ProductListDTO:
        # Stored categories are lower-cased on write
        category = (category or "").strip().lower() or None
        async with self._uow_factory() as uow:
            rows = await uow.products.list(category=category)
        return ProductListDTO(
            products=[map_product(r) for r in rows],
            category_label=category or ALL_CATEGORIES_LABEL,
        )

    async def get_product(self, product_id: str) -> ProductDTO:
        async with self._uow_factory() as uow:
            row = await uow.products.get_by_id(product_id)
        if row is None:
            raise AppError(NOT_FOUND_MESSAGE, 404)
        return map_product(row)

    async def create_product(self, data: Mapping[str, Any]) -> ProductDTO:
        result = validate_product(data)
        if not result.ok:
            raise ProductValidationError(result.errors)
        async with self._uow_factory() as uow:
            row = await uow.products.add(result.value)
            await uow.commit()
        logger.info("product_created", product_id=row.id, category=row.category)
        return map_product(row)

    async def update_product(self, product_id: str, data: Mapping[str, Any]) -> ProductDTO:
        async with self._uow_factory() as uow:
            current = await uow.products.get_by_id(product_id)
            if current is None:
                raise AppError(NOT_FOUND_MESSAGE, 404)
            result = validate_product_update(writable_fields(current), data)
            if not result.ok:
                raise ProductValidationError(result.errors)
            row = await uow.products.update(product_id, result.value)
            if row is None:
                raise AppError(NOT_FOUND_MESSAGE, 404)
            await uow.commit()
        logger.info("product_updated", product_id=row.id)
        return map_product(row)

    async def delete_product(self, product_id: str) -> None:
        async with self._uow_factory() as uow:
            deleted = await uow.products.delete(product_id)
            await uow.commit()
        logger.info("product_deleted", product_id=product_id, deleted=deleted)
