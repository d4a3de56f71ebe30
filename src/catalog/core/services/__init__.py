"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Product Services
from .product.product_service import ProductService
from .product.store import (
    DatabaseProductStore,
    InMemoryProductStore,
    ProductStore,
)

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Product Services
    "ProductService",
    "ProductStore",
    "InMemoryProductStore",
    "DatabaseProductStore",
]
