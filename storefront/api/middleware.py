"""API middleware for the storefront API.

Provides:
- Request correlation, with catalog state on every access log line
- Error envelopes for exceptions no handler turned into a response
"""

import time
from typing import Any, Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from storefront.domain.exceptions import DomainError, InvalidPriceError

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def catalog_context(request: Request) -> dict[str, Any]:
    """Catalog state to log alongside a request.

    Returns:
        Active filter and loaded product count, or an empty dict when the
        application has no storefront attached.
    """
    storefront = getattr(request.app.state, "storefront", None)
    if storefront is None:
        return {}
    store = storefront.view.store
    return {
        "active_filter": store.active_filter,
        "catalog_size": len(store.all_products),
        "catalog_loading": storefront.view.loading,
    }


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Correlates a request with the log lines it produces.

    The request ID is taken from the ``X-Request-ID`` header or generated,
    bound into the structlog context for the duration of the request and
    echoed on the response. The completion line records the catalog filter
    and size as they were after the request, so a filter or reload call
    can be traced from the access log alone.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request with correlation ID.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response with request ID header.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
        finally:
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=getattr(response, "status_code", 500),
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                **catalog_context(request),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# ============================================================================
# Error Handling Middleware
# ============================================================================


def _error_response(
    status_code: int,
    error_code: str,
    message: str,
    details: Any,
    request_id: str | None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": request_id,
        },
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turns exceptions that escaped the routers into error envelopes.

    Routers map the expected catalog errors (unknown product, variant or
    category) themselves. Anything reaching this middleware is a broken
    invariant: a ``DomainError`` keeps its message and details, anything
    else is reported as a bare internal error.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Handle errors uniformly.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or error response.
        """
        request_id = getattr(request.state, "request_id", None)
        try:
            return await call_next(request)
        except InvalidPriceError as e:
            logger.error(
                "Price could not be computed",
                path=request.url.path,
                error=e.message,
                details=e.details,
            )
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INVALID_PRICE",
                e.message,
                e.details,
                request_id,
            )
        except DomainError as e:
            logger.error(
                "Unhandled domain error",
                path=request.url.path,
                error_type=type(e).__name__,
                error=e.message,
            )
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "DOMAIN_ERROR",
                e.message,
                e.details,
                request_id,
            )
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An internal error occurred",
                [],
                request_id,
            )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    The request ID middleware is added last so it runs first and the
    error handler can read the ID from request state.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)
