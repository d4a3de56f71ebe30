"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse, PlainTextResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.controllers.product import ProductController
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.http.routers.service.product import router as product_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.models import MessageGreeting, MessageIn, MessageReply
from src.catalog.core.services import (
    DatabaseProductStore,
    DbManageService,
    DbSessionService,
    InMemoryProductStore,
    ProductService,
    ProductStore,
)
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config

__all__ = ["app", "create_app", "build_dependencies"]


def build_dependencies(
    config: ConfigData, store: ProductStore | None = None
) -> ApplicationDependencies:
    """Wire store, service and controller for one application instance.

    An explicit ``store`` takes precedence over ``config.store.backend``.
    """
    database_service = None
    if store is None:
        if config.store.backend == "database":
            database_service = DbSessionService(config)
            DbManageService(database_service.engine).create_all()
            store = DatabaseProductStore(database_service)
        else:
            store = InMemoryProductStore()
    logger.info("Using product store {}", type(store).__name__)

    service = ProductService(store)
    return ApplicationDependencies(
        product_store=store,
        product_service=service,
        product_controller=ProductController(service),
        database_service=database_service,
    )


def _configure_cors(app: FastAPI, config: ConfigData) -> None:
    cors = config.app.cors
    if (
        config.app.environment == "production"
        and "*" in cors.origins
        and cors.allow_credentials
    ):
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    # Prefer proxy headers if you run behind a reverse proxy
    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("{} {}", request.method, request.url.path)
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    logger.bind(error_count=len(exc.errors())).warning("request.validation_error")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "request_id": request_id},
    )


def _register_demo_routes(app: FastAPI) -> None:
    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        return "Hey there!!"

    @app.get("/about", response_class=PlainTextResponse)
    async def about() -> str:
        return "This is the about page"

    @app.get("/message")
    async def get_message() -> MessageGreeting:
        return MessageGreeting(message="Hello from express backend")

    @app.post("/message")
    async def post_message(payload: MessageIn) -> MessageReply:
        logger.info("Received: {} {}", payload.name, payload.message)
        return MessageReply.thanks(payload.name)


def create_app(
    config: ConfigData | None = None, store: ProductStore | None = None
) -> FastAPI:
    """Build the application.

    Args:
        config: Configuration to use; defaults to the current context's.
        store: Product store to serve from instead of the configured backend.
    """
    app_config = config or get_config()
    configure_logging(app_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting up application in {} environment", app_config.app.environment
        )
        deps = build_dependencies(app_config, store)
        app.state.app_dependencies = deps
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if deps.database_service is not None:
                deps.database_service.dispose()

    is_production = app_config.app.environment == "production"
    app = FastAPI(
        title=app_config.app.name,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    _configure_cors(app, app_config)
    app.middleware("http")(log_requests)
    app.exception_handler(RequestValidationError)(validation_error_handler)

    app.include_router(health_router)
    app.include_router(product_router)
    _register_demo_routes(app)

    return app


app = create_app()


def main() -> None:
    import uvicorn

    config = get_config()
    # Access logging is handled by the request middleware
    uvicorn.run(
        app,
        host=config.app.host,
        port=config.app.port,
        access_log=False,
    )


if __name__ == "__main__":
    main()
