from dataclasses import dataclass

from src.catalog.api.http.controllers.product import ProductController
from src.catalog.core.services import DbSessionService, ProductService, ProductStore


@dataclass
class ApplicationDependencies:
    product_store: ProductStore
    product_service: ProductService
    product_controller: ProductController
    database_service: DbSessionService | None = None
