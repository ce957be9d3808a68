"""
Admin Portal Response Utilities
Response envelope and error translation for every route
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from typing import Any, Dict, Optional

from .logging_config import api_logger
from .services.exceptions import PortalError


# ============================================================
# SUCCESS RESPONSES
# ============================================================

def success(data: Any = None, message: Optional[str] = None) -> Dict:
    """Create success envelope"""
    response = {"status": "success"}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response


def deleted(label: str) -> Dict:
    """200 Deleted envelope"""
    return success(message=f"{label} deleted")


# ============================================================
# ERROR RESPONSES
# ============================================================

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


async def portal_exception_handler(request: Request, exc: PortalError) -> JSONResponse:
    """Service-layer errors carry their own status code"""
    level = "warning" if exc.status_code < 500 else "error"
    getattr(api_logger, level)(
        f"API Error: {exc.message}",
        status_code=exc.status_code,
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    api_logger.warning(
        f"HTTP Error: {exc.detail}",
        status_code=exc.status_code,
        path=request.url.path,
    )
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed payloads are reported as 400 without naming fields"""
    api_logger.warning(
        "Invalid request payload",
        status_code=400,
        path=request.url.path,
        errors=exc.errors(),
    )
    return error_response(400, "Invalid request payload")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    api_logger.error(
        f"Unexpected error: {exc}",
        error=exc,
        path=request.url.path,
    )
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PortalError, portal_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
