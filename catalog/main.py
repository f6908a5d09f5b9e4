# catalog/main.py
"""
FastAPI application for the product catalog.

``create_app`` wires the pipeline: request logging middleware, the
/api/products routes with their auth/validation dependencies, a catch-all
for unknown routes and the error handlers that render every failure.
The module-level ``app`` is what uvicorn serves::

    uvicorn catalog.main:app --port 3000
"""
import logging
from typing import Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from .config import Settings, settings as default_settings
from .core import ProductIn
from .database import ProductStore
from .errors import NotFoundError
from .logging_config import setup_logging
from .middleware import authenticate, log_requests, validate_product
from .responses import add_error_handlers
from .sdk import (
    list_products_logic, search_products_logic, product_stats_logic,
    get_product_logic, create_product_logic, update_product_logic,
    delete_product_logic,
)

logger = logging.getLogger(__name__)

router = APIRouter()

def get_store(request: Request) -> ProductStore:
    return request.app.state.store

# ---------------------------
# Root
# ---------------------------
@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello World 🚀"

# ---------------------------
# Product endpoints
#
# Static sub-paths (/search, /stats) must stay registered before
# /{product_id}, otherwise they are captured as ids.
# ---------------------------
@router.get("/api/products")
@router.get("/api/products/", include_in_schema=False)
async def list_products(category: Optional[str] = None, page: Optional[str] = None,
                        limit: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return await list_products_logic(store, category, page, limit)

@router.get("/api/products/search")
async def search_products(name: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return await search_products_logic(store, name)

@router.get("/api/products/stats")
async def product_stats(store: ProductStore = Depends(get_store)):
    return await product_stats_logic(store)

@router.get("/api/products/{product_id}")
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)

@router.post("/api/products", status_code=201)
async def create_product(payload: ProductIn = Depends(validate_product),
                         store: ProductStore = Depends(get_store)):
    return await create_product_logic(store, payload)

@router.put("/api/products/{product_id}")
async def update_product(product_id: str, payload: ProductIn = Depends(validate_product),
                         store: ProductStore = Depends(get_store)):
    return await update_product_logic(store, product_id, payload)

@router.delete("/api/products/{product_id}", dependencies=[Depends(authenticate)])
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await delete_product_logic(store, product_id)

# ---------------------------
# Catch-all, registered last. Also answers known paths hit with an
# unsupported method, so clients see 404 rather than 405.
# ---------------------------
@router.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"],
    include_in_schema=False,
)
async def route_not_found(path: str):
    raise NotFoundError("Route not found")


def create_app(store: Optional[ProductStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build a catalog app around its own store.

    Tests pass a fresh ``ProductStore`` and ``Settings``; the module-level
    ``app`` uses the seed data and environment settings.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else ProductStore()
    app.state.settings = settings

    app.middleware("http")(log_requests)
    app.include_router(router)
    add_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Server running on port %s", default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
