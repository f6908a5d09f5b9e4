"""
Request interceptors for the catalog API.

``log_requests`` is installed as HTTP middleware and sees every request.
``authenticate`` and ``validate_product`` are FastAPI dependencies that only
the mutating routes declare.  ``validate_product`` itself depends on
``authenticate``, so on create/update the shared secret is always checked
before the body is looked at.

Any rejection is raised as an ``AppError`` subclass and rendered by the
handlers in ``responses.py``.
"""

import hmac
import json
import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict

import pydantic
from fastapi import Depends, Request

from .core import ProductIn
from .errors import UnauthorizedError, ValidationError

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


async def log_requests(request: Request, call_next):
    """Log timestamp, method and path of every incoming request."""
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    logger.info("[%s] %s %s", _timestamp(), request.method, target)
    return await call_next(request)


async def authenticate(request: Request) -> None:
    settings = request.app.state.settings
    api_key = request.headers.get(settings.api_key_header)
    if not api_key or not hmac.compare_digest(api_key.encode(), settings.api_key.encode()):
        raise UnauthorizedError()


def _reject_constant(token: str):
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(token)


async def _read_body(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise ValidationError("Request body must be valid JSON")
    return body if isinstance(body, dict) else {}


async def validate_product(request: Request, _: None = Depends(authenticate)) -> ProductIn:
    """Check ``name`` and ``price`` and parse the body into ``ProductIn``."""
    body = await _read_body(request)

    name = body.get("name")
    if not name or not isinstance(name, str):
        raise ValidationError("Product name is required and must be a string")

    price = body.get("price")
    if (price is None or isinstance(price, bool) or not isinstance(price, (int, float))
            or (isinstance(price, float) and not math.isfinite(price))):
        raise ValidationError("Product price is required and must be a number")

    try:
        return ProductIn.model_validate(body)
    except pydantic.ValidationError as e:
        field = e.errors()[0]["loc"][0]
        raise ValidationError(f"{field} has an invalid type")
