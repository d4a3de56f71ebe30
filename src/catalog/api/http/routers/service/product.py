"""Product API router.

Routes are matched in registration order, so ``/special`` has to be
registered before ``/{product_id}`` or the parametric route would claim it.
The collection routes are also registered with a trailing slash so both forms
are served without a redirect.
"""

from fastapi import APIRouter, Body, Depends
from starlette.responses import JSONResponse

from src.catalog.api.http.controllers.product import ProductController
from src.catalog.api.http.deps import get_product_controller
from src.catalog.entities.service.product import ProductCreate

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_class=JSONResponse)
@router.get("/", response_class=JSONResponse, include_in_schema=False)
def list_products(
    controller: ProductController = Depends(get_product_controller),
) -> JSONResponse:
    """List all products."""
    return controller.list_products()


@router.get("/special", response_class=JSONResponse)
def special_products(
    controller: ProductController = Depends(get_product_controller),
) -> JSONResponse:
    """Static special-products message."""
    return controller.get_special()


@router.get("/{product_id}", response_class=JSONResponse)
def get_product(
    product_id: str,
    controller: ProductController = Depends(get_product_controller),
) -> JSONResponse:
    """Get a product by ID."""
    return controller.get_product(product_id)


@router.post("", status_code=201, response_class=JSONResponse)
@router.post(
    "/", status_code=201, response_class=JSONResponse, include_in_schema=False
)
def create_product(
    payload: ProductCreate | None = Body(default=None),
    controller: ProductController = Depends(get_product_controller),
) -> JSONResponse:
    """Create a new product. A missing body is forwarded as empty fields."""
    return controller.create_product(payload or ProductCreate())
