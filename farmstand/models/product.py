import enum
import uuid

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from farmstand.models.base import Base


class Category(str, enum.Enum):
    fruit = "fruit"
    vegetable = "vegetable"
    dairy = "dairy"
    mushrooms = "mushrooms"


# Shared by the list view and both forms
CATEGORIES: tuple[str, ...] = tuple(c.value for c in Category)


# Upper bound of the 32-bit INTEGER quantity column
MAX_QUANTITY = 2_147_483_647


def new_product_id() -> str:
    return uuid.uuid4().hex


class Product(Base):
    __tablename__ = "products"

    id = Column(String(32), primary_key=True, default=new_product_id)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String, nullable=False, index=True)  # fruit | vegetable | dairy | mushrooms
    quantity = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
