"""FastAPI dependency implementations."""

from fastapi import Request

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.controllers.product import ProductController


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies built during application startup."""
    return request.app.state.app_dependencies


def get_product_controller(request: Request) -> ProductController:
    """Get the product controller instance."""
    return get_app_dependencies(request).product_controller
