"""API dependency helpers and service providers."""

from fastapi import Depends, Request

from farmstand.db import Database
from farmstand.infra.unit_of_work import SqlAlchemyUnitOfWork
from farmstand.services.products import ProductService

__all__ = [
    "get_database",
    "get_product_service",
]


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_product_service(db: Database = Depends(get_database)) -> ProductService:
    return ProductService(lambda: SqlAlchemyUnitOfWork(db.session_factory))
