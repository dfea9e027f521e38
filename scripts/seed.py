# scripts/seed.py
"""
Insert a small sample catalog into the products table.

Run from the repository root:  python scripts/seed.py [--reset]
Every row goes through the same validation as the web form.
"""

import argparse
import asyncio
import logging

from sqlalchemy import delete

from farmstand.core.config import get_settings
from farmstand.db import Database
from farmstand.infra.unit_of_work import SqlAlchemyUnitOfWork
from farmstand.models import Product
from farmstand.services.products import ProductService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SEED_PRODUCTS: list[dict] = [
    {"name": "Fairy Eggplant", "price": 1.00, "category": "vegetable", "quantity": 20},
    {"name": "Organic Goddess Melon", "price": 4.99, "category": "fruit", "quantity": 8},
    {"name": "Organic Mini Seedless Watermelon", "price": 3.99, "category": "fruit", "quantity": 5},
    {"name": "Organic Celery", "price": 1.50, "category": "vegetable", "quantity": 12},
    {"name": "Chocolate Whole Milk", "price": 2.69, "category": "dairy", "quantity": 10},
    {"name": "Shiitake Mushrooms", "price": 6.25, "category": "mushrooms", "quantity": 4},
]


async def seed(*, reset: bool) -> int:
    db = Database(get_settings().database_url)
    db.connect()
    try:
        await db.create_schema()
        if reset:
            async with db.session_factory() as session:
                await session.execute(delete(Product))
                await session.commit()
            logger.info("products table cleared")

        svc = ProductService(lambda: SqlAlchemyUnitOfWork(db.session_factory))
        for data in SEED_PRODUCTS:
            product = await svc.create_product(data)
            logger.info("seeded %s (%s)", product.name, product.id)
        return len(SEED_PRODUCTS)
    finally:
        await db.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the farm stand catalog")
    parser.add_argument("--reset", action="store_true", help="delete existing products first")
    args = parser.parse_args()

    count = asyncio.run(seed(reset=args.reset))
    print(f"seed: inserted {count} products")


if __name__ == "__main__":
    main()
