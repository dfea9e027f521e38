from __future__ import annotations

from typing import Any

from farmstand.dto.product import ProductDTO
from farmstand.repositories.interfaces import ProductRow


def map_product(row: ProductRow) -> ProductDTO:
    return ProductDTO.model_validate(row)


def writable_fields(row: ProductRow) -> dict[str, Any]:
    """Stored field values of a product, used as the baseline for updates."""
    return {
        "name": row.name,
        "price": row.price,
        "category": row.category,
        "quantity": row.quantity,
    }
