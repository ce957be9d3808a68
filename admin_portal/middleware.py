"""
Custom middleware for the session gate, security headers and request logging.
"""
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from .auth import SESSION_TOKEN, get_token_service
from .logging_config import get_logger

request_logger = get_logger("requests")


def is_public_path(path: str, public_paths) -> bool:
    """Exact match or a sub-path of an allow-listed prefix."""
    return any(path == prefix or path.startswith(prefix + "/") for prefix in public_paths)


class SessionGateMiddleware(BaseHTTPMiddleware):
    """
    Let public paths through; everything else needs a valid session cookie.

    Missing or invalid tokens are redirected to the sign-in page. The gate
    only checks the signature, expiry and token type and passes the request
    on unchanged. One-time invite tokens never open it.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return await call_next(request)

        tokens = get_token_service()
        settings = tokens.settings

        if is_public_path(request.url.path, settings.public_paths):
            return await call_next(request)

        # The public site reads published content without a session
        if request.method in ("GET", "HEAD") and is_public_path(request.url.path, settings.public_read_paths):
            return await call_next(request)

        token = request.cookies.get(settings.session_cookie_name)
        if not token:
            return RedirectResponse(settings.sign_in_path, status_code=307)

        result = tokens.verify_token(token)
        if not result.valid or result.claims.get("type") != SESSION_TOKEN:
            request_logger.warning("Invalid session token", path=request.url.path)
            return RedirectResponse(settings.sign_in_path, status_code=307)

        return await call_next(request)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        # Prevent clickjacking
        response.headers["X-Frame-Options"] = "DENY"

        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log requests for debugging and monitoring."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.time()
        response = await call_next(request)
        duration_ms = (time.time() - start_time) * 1000

        level = "info" if response.status_code < 400 else "warning"
        getattr(request_logger, level)(
            f"{request.method} {request.url.path} -> {response.status_code}",
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        return response
