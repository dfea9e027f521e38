"""DTOs for products handed to the templates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductDTO(BaseModel):
    id: str = Field(description="Store-assigned identifier")
    name: str
    price: float
    category: str
    quantity: int = 0

    model_config = ConfigDict(from_attributes=True)


class ProductListDTO(BaseModel):
    products: list[ProductDTO]
    category_label: str = Field(description='Selected category, or "All"')
