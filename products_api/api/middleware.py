"""API middleware for the products API.

Provides:
- Request ID correlation
- Bearer token authentication
- Error handling
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from products_api.auth.security import JwtTokenProvider
from products_api.domain.exceptions import InvalidTokenError

logger = structlog.get_logger()


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware to add request ID for correlation.

    Generates or extracts a request ID and adds it to:
    - Request state for access in handlers
    - Response headers for client correlation
    - Log context for tracing
    """

    HEADER_NAME = "X-Request-ID"

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
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid4())

        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        response = None

        try:
            response = await call_next(request)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=getattr(response, "status_code", 500),
                duration_ms=round(duration_ms, 2),
            )

            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[self.HEADER_NAME] = request_id

        return response


# ============================================================================
# JWT Authentication Middleware
# ============================================================================


class JwtAuthenticationMiddleware(BaseHTTPMiddleware):
    """Middleware that establishes the caller's identity from a bearer token.

    Requests without an ``Authorization: Bearer <token>`` header, or with a
    token that fails verification, continue unauthenticated with
    ``request.state.user`` set to None. Routes decide whether identity is
    required.
    """

    PREFIX = "Bearer "

    def __init__(self, app, token_provider: JwtTokenProvider | None = None) -> None:
        super().__init__(app)
        self.token_provider = token_provider or JwtTokenProvider()

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Attach the authenticated user, if any, to request state.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Handler response.
        """
        request.state.user = None

        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith(self.PREFIX):
            return await call_next(request)

        token = auth_header[len(self.PREFIX):].strip()

        try:
            request.state.user = self.token_provider.authenticate(token)
        except InvalidTokenError as e:
            logger.warning(
                "Rejected bearer token",
                path=request.url.path,
                method=request.method,
                reason=e.message,
            )
        else:
            structlog.contextvars.bind_contextvars(username=request.state.user.username)

        try:
            return await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("username")


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware for consistent error handling.

    Catches unhandled exceptions and returns standardized error responses.
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
        try:
            return await call_next(request)
        except Exception as e:
            request_id = getattr(request.state, "request_id", None)

            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error_code": "INTERNAL_ERROR",
                    "message": "An internal error occurred",
                    "details": [],
                    "request_id": request_id,
                },
            )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    # Error handling (innermost, wraps the route handlers)
    app.add_middleware(ErrorHandlerMiddleware)

    # Bearer token authentication
    app.add_middleware(JwtAuthenticationMiddleware)

    # Request ID correlation (added last, so it runs first)
    app.add_middleware(RequestIdMiddleware)
