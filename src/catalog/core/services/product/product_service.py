from src.catalog.core.services.product.store import ProductStore
from src.catalog.entities.service.product import Product, ProductCreate


class ProductService:
    """Delegates product operations to the configured store.

    Store errors propagate unchanged.
    """

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def get_all_products(self) -> list[Product]:
        return self._store.list()

    def get_product_by_id(self, product_id: int) -> Product | None:
        return self._store.get_by_id(product_id)

    def create_product(self, payload: ProductCreate) -> Product:
        return self._store.insert(name=payload.name, price=payload.price)
