"""Route table tests for the product router."""

from fastapi.routing import APIRoute

from src.catalog.api.http.routers.service.product import router


def _routes() -> list[tuple[str, str]]:
    return [
        (method, route.path)
        for route in router.routes
        if isinstance(route, APIRoute)
        for method in sorted(route.methods)
    ]


class TestProductRouter:
    def test_registration_order(self):
        assert _routes() == [
            ("GET", "/products/"),
            ("GET", "/products"),
            ("GET", "/products/special"),
            ("GET", "/products/{product_id}"),
            ("POST", "/products/"),
            ("POST", "/products"),
        ]

    def test_special_registered_before_parametric_route(self):
        paths = [path for _, path in _routes()]

        assert paths.index("/products/special") < paths.index("/products/{product_id}")

    def test_trailing_slash_routes_are_hidden_from_schema(self):
        hidden = [
            route.path
            for route in router.routes
            if isinstance(route, APIRoute) and not route.include_in_schema
        ]

        assert hidden == ["/products/", "/products/"]
