"""Storefront API main application module.

This module wires the catalog engine to its collaborators, initializes
the FastAPI application, and mounts the catalog view on startup.
"""

import asyncio
import random
from contextlib import asynccontextmanager, suppress
from dataclasses import dataclass
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from storefront.api.cart import router as cart_router
from storefront.api.catalog import router as catalog_router
from storefront.api.health import router as health_router
from storefront.api.middleware import setup_middleware
from storefront.api.products import router as products_router
from storefront.application.catalog_view import CatalogView
from storefront.catalog.cart_bridge import CartBridge
from storefront.catalog.loader import CatalogLoader, ProductSource
from storefront.catalog.store import CatalogStore
from storefront.infrastructure.collaborators import InMemoryCartSink, LogNotifier
from storefront.infrastructure.config import Settings, settings
from storefront.infrastructure.logging import configure_logging
from storefront.infrastructure.product_client import ProductSourceClient

logger = structlog.get_logger()


@dataclass
class Storefront:
    """The catalog view and the collaborators it was built with."""

    view: CatalogView
    cart: InMemoryCartSink
    notifier: LogNotifier
    source: ProductSource


def build_storefront(
    config: Settings = settings,
    source: ProductSource | None = None,
) -> Storefront:
    """Build the catalog view and its collaborators.

    Args:
        config: Application settings.
        source: Product data source (HTTP client from settings if omitted).

    Returns:
        Wired Storefront.
    """
    if source is None:
        source = ProductSourceClient(config.catalog_url, timeout=config.fetch_timeout)
    store = CatalogStore(
        rng=random.Random(config.stock_seed),
        stock_probability=config.stock_probability,
    )
    cart = InMemoryCartSink()
    notifier = LogNotifier()
    view = CatalogView(
        store=store,
        loader=CatalogLoader(source, store),
        bridge=CartBridge(cart, notifier),
    )
    return Storefront(view=view, cart=cart, notifier=notifier, source=source)


def log_load_task_failure(task: asyncio.Task) -> None:
    """Log an exception that escaped the background catalog load.

    Load failures are normally reported by the loader itself; this catches
    anything outside that taxonomy so it is not lost with the task.
    """
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(
            "Catalog load task failed",
            error=str(exc),
            error_type=type(exc).__name__,
            exc_info=exc,
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Startup mounts the catalog view, which fetches the catalog in the
    background. Shutdown unmounts it so a fetch still in flight is
    discarded.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings.log_level, settings.log_json)
    storefront: Storefront = app.state.storefront

    logger.info(
        "Starting storefront API",
        version=settings.api_version,
        catalog_url=settings.catalog_url,
        autoload=settings.autoload,
    )

    load_task: asyncio.Task | None = None
    if settings.autoload:
        load_task = asyncio.create_task(storefront.view.mount())
        load_task.add_done_callback(log_load_task_failure)

    yield

    logger.info("Shutting down storefront API")
    storefront.view.unmount()
    if load_task is not None and not load_task.done():
        load_task.cancel()
        with suppress(asyncio.CancelledError):
            await load_task
    if isinstance(storefront.source, ProductSourceClient):
        await storefront.source.close()


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": request_id,
        },
    )


def create_app(storefront: Storefront | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        storefront: Prebuilt storefront (built from settings if omitted).

    Returns:
        Configured application.
    """
    app = FastAPI(
        title="Storefront API",
        description="Product catalog with variant pricing and add-to-cart",
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.storefront = storefront or build_storefront()

    setup_middleware(app)

    app.include_router(health_router, tags=["Health"])
    app.include_router(catalog_router)
    app.include_router(products_router)
    app.include_router(cart_router)

    app.add_exception_handler(HTTPException, http_exception_handler)
    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("storefront.main:app", host="0.0.0.0", port=8000)
