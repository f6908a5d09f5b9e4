# catalog/responses.py
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import AppError

logger = logging.getLogger(__name__)

# ---------------------------
# Success envelope
# ---------------------------
def success(data: Any, **fields: Any) -> Dict[str, Any]:
    return {"status": "success", **fields, "data": data}

# ---------------------------
# Error envelope
# ---------------------------
def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"status": "error", "message": message}, status_code=status_code)

async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.error("Error: %s", exc.message)
    return _error_response(exc.message, exc.status_code)

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid data") if errors else "Invalid data"
    logger.error("Error: %s", message)
    return _error_response(message, 400)

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # methods the catch-all does not list still end up here as a 405
    if exc.status_code in (404, 405):
        logger.error("Error: Route not found")
        return _error_response("Route not found", 404)
    message = exc.detail if isinstance(exc.detail, str) else "Internal Server Error"
    logger.error("Error: %s", message)
    return _error_response(message, exc.status_code)

async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error: %s", exc)
    return _error_response("Internal Server Error", 500)

def add_error_handlers(app: FastAPI) -> None:
    """Make every failure in the pipeline end up in the same JSON envelope."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
