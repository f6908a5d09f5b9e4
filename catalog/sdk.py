import re
from typing import Optional, Dict, Any

from .core import ProductIn
from .database import ProductStore, DEFAULT_PAGE, DEFAULT_LIMIT
from .errors import ValidationError
from .responses import success

# Handler logic behind every /api/products route.
# Each function returns the success envelope or raises an AppError.

def _positive_int(raw: Optional[str], param: str, default: int) -> int:
    if raw is None:
        return default
    # plain ASCII digits only; int() alone would take "1_0", " 2" or "+3"
    value = int(raw) if re.fullmatch(r"[0-9]+", raw) else 0
    if value < 1:
        raise ValidationError(f'Query parameter "{param}" must be a positive integer')
    return value

async def list_products_logic(store: ProductStore, category: Optional[str] = None,
                              page: Optional[str] = None, limit: Optional[str] = None) -> Dict[str, Any]:
    page_no = _positive_int(page, "page", DEFAULT_PAGE)
    page_size = _positive_int(limit, "limit", DEFAULT_LIMIT)
    items, total = store.list(category=category, page=page_no, limit=page_size)
    return success([p.to_dict() for p in items], page=page_no, total=total)

async def search_products_logic(store: ProductStore, name: Optional[str]) -> Dict[str, Any]:
    results = store.search(name)
    return success([p.to_dict() for p in results], count=len(results))

async def product_stats_logic(store: ProductStore) -> Dict[str, Any]:
    return success(store.stats())

async def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    return success(store.get(product_id).to_dict())

async def create_product_logic(store: ProductStore, payload: ProductIn) -> Dict[str, Any]:
    p = store.create(payload)
    return success(p.to_dict(), message="Product successfully added")

async def update_product_logic(store: ProductStore, product_id: str, payload: ProductIn) -> Dict[str, Any]:
    p = store.update(product_id, payload)
    return success(p.to_dict(), message="Product successfully updated")

async def delete_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    p = store.delete(product_id)
    return success(p.to_dict(), message="Product successfully deleted")
