# farmstand/schemas/product.py
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from farmstand.models.product import MAX_QUANTITY, Category


class ProductFields(BaseModel):
    """Writable product fields, checked before every insert or update."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    price: float = Field(ge=0, allow_inf_nan=False)
    category: Category
    quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY)

    model_config = ConfigDict(extra="ignore")

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value
