"""Product stores: the persistence boundary behind the product service.

Two interchangeable implementations share the ``ProductStore`` protocol:

- ``InMemoryProductStore`` keeps an owned list of products. It never fails.
- ``DatabaseProductStore`` persists to the ``product`` table through
  ``ProductRepository`` and reports any SQLAlchemy failure, or a value the
  driver cannot bind, as ``StoreError``.
"""

import threading
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from src.catalog.core.errors import StoreError
from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.entities.service.product import Product, ProductRepository


@runtime_checkable
class ProductStore(Protocol):
    """Capability set every product store provides."""

    def list(self) -> list[Product]: ...

    def get_by_id(self, product_id: int) -> Product | None: ...

    def insert(self, name: str | None, price: int | None) -> Product: ...

    def health_check(self) -> bool: ...


SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product(id=1, name="Laptop", price=999),
    Product(id=2, name="Phone", price=599),
)


class InMemoryProductStore:
    """Product store over a list owned by this instance.

    Products are returned in insertion order. New ids continue from the
    highest id present.
    """

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        seed = SAMPLE_PRODUCTS if products is None else products
        self._products: list[Product] = [p.model_copy() for p in seed]
        self._lock = threading.Lock()

    def list(self) -> list[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            for product in self._products:
                if product.id == product_id:
                    return product.model_copy()
        return None

    def insert(self, name: str | None, price: int | None) -> Product:
        with self._lock:
            next_id = max((p.id for p in self._products), default=0) + 1
            product = Product(id=next_id, name=name, price=price)
            self._products.append(product)
            logger.debug("Stored product {} in memory", next_id)
            return product.model_copy()

    def health_check(self) -> bool:
        return True


class DatabaseProductStore:
    """Product store backed by the relational ``product`` table."""

    def __init__(self, database_service: DbSessionService) -> None:
        self._database_service = database_service

    def list(self) -> list[Product]:
        try:
            with self._database_service.session_scope() as session:
                return ProductRepository(session).list_all()
        except SQLAlchemyError as e:
            raise StoreError("Failed to list products") from e

    def get_by_id(self, product_id: int) -> Product | None:
        try:
            with self._database_service.session_scope() as session:
                return ProductRepository(session).get(product_id)
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError(f"Failed to load product {product_id}") from e

    def insert(self, name: str | None, price: int | None) -> Product:
        try:
            with self._database_service.session_scope() as session:
                product = ProductRepository(session).create(name=name, price=price)
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError("Failed to insert product") from e
        logger.debug("Stored product {} in database", product.id)
        return product

    def health_check(self) -> bool:
        return self._database_service.health_check()
