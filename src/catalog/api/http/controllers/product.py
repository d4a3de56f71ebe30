"""HTTP adaptation for product operations.

Each method maps a service outcome to a status code and a JSON body. Store
failures are logged with their traceback and answered with a generic message.
"""

import math
import re

from loguru import logger
from starlette.responses import JSONResponse

from src.catalog.core.errors import StoreError
from src.catalog.core.services.product.product_service import ProductService
from src.catalog.entities.service.product import ProductCreate

# Ids are stored in a signed 64-bit INTEGER column.
MIN_PRODUCT_ID = -(2**63)
MAX_PRODUCT_ID = 2**63 - 1

_INTEGER_ID = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_ID = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_PREFIXED_ID = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)


def parse_product_id(raw: str) -> int | None:
    """Parse a path segment as a product id.

    Accepts ASCII numeric literals (``7``, ``+7``, ``7.0``, ``7e0``, ``0x7``)
    whose value is integral. Returns None for anything else, including values
    outside the id column's range; such a value can never match a stored id.
    """
    text = raw.strip()
    if _INTEGER_ID.fullmatch(text):
        value = int(text)
    elif _PREFIXED_ID.fullmatch(text):
        value = int(text, 0)
    elif _DECIMAL_ID.fullmatch(text):
        number = float(text)
        if not math.isfinite(number) or not number.is_integer():
            return None
        value = int(number)
    else:
        return None

    if not MIN_PRODUCT_ID <= value <= MAX_PRODUCT_ID:
        return None
    return value


class ProductController:
    def __init__(self, service: ProductService) -> None:
        self._service = service

    def list_products(self) -> JSONResponse:
        try:
            products = self._service.get_all_products()
        except StoreError:
            logger.exception("Failed to fetch products")
            return JSONResponse(
                status_code=500, content={"error": "Failed to fetch products"}
            )
        return JSONResponse(content=[product.to_json() for product in products])

    def get_special(self) -> JSONResponse:
        return JSONResponse(content={"message": "Special products"})

    def get_product(self, raw_id: str) -> JSONResponse:
        product_id = parse_product_id(raw_id)
        if product_id is None:
            return JSONResponse(status_code=404, content={"error": "Product not found"})

        try:
            product = self._service.get_product_by_id(product_id)
        except StoreError:
            logger.exception("Failed to fetch product {}", product_id)
            return JSONResponse(
                status_code=500, content={"error": "Failed to fetch product"}
            )

        if product is None:
            return JSONResponse(status_code=404, content={"error": "Product not found"})
        return JSONResponse(content=product.to_json())

    def create_product(self, payload: ProductCreate) -> JSONResponse:
        try:
            product = self._service.create_product(payload)
        except StoreError:
            logger.exception("Failed to create product")
            return JSONResponse(
                status_code=500, content={"error": "Failed to create product"}
            )
        return JSONResponse(status_code=201, content=product.to_json())
