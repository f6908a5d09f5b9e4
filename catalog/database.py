import uuid
from typing import Callable, Dict, List, Optional, Tuple

from .core import ProductIn, _make_product, _update_fields
from .errors import NotFoundError, ValidationError
from .models import Product

# Records every fresh store starts with (and the service after a restart).
SEED_PRODUCTS: List[Dict] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 3


def _new_id() -> str:
    return uuid.uuid4().hex


class ProductStore:
    """In-memory, insertion-ordered collection of products.

    Each app owns one store.  There are no locks: request handlers run on a
    single event loop and never await in the middle of a mutation.
    """

    def __init__(self, seed: Optional[List[Dict]] = None, id_factory: Callable[[], str] = _new_id):
        self._id_factory = id_factory
        self._seed = SEED_PRODUCTS if seed is None else seed
        self._products: Dict[str, Product] = {}
        self.reset()

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: str) -> bool:
        return product_id in self._products

    def reset(self) -> None:
        self._products = {}
        for raw in self._seed:
            p = Product.model_validate(raw)
            self._products[p.id] = p

    def all(self) -> List[Product]:
        return list(self._products.values())

    def list(self, category: Optional[str] = None, page: int = DEFAULT_PAGE,
             limit: int = DEFAULT_LIMIT) -> Tuple[List[Product], int]:
        """Return one page of products and the size of the filtered set."""
        filtered = [p for p in self._products.values() if not category or p.category == category]
        start = (page - 1) * limit
        return filtered[start:start + limit], len(filtered)

    def search(self, term: Optional[str]) -> List[Product]:
        if not term:
            raise ValidationError('Search term "name" is required')
        term = term.lower()
        return [p for p in self._products.values() if term in p.name.lower()]

    def stats(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for p in self._products.values():
            if p.category is None:
                continue
            counts[p.category] = counts.get(p.category, 0) + 1
        return counts

    def get(self, product_id: str) -> Product:
        p = self._products.get(product_id)
        if p is None:
            raise NotFoundError(f"Product with ID {product_id} not found")
        return p

    def create(self, payload: ProductIn) -> Product:
        pid = self._id_factory()
        while pid in self._products:
            pid = self._id_factory()
        p = _make_product(pid, payload)
        self._products[pid] = p
        return p

    def update(self, product_id: str, payload: ProductIn) -> Product:
        current = self.get(product_id)
        fields = _update_fields(payload)
        # reassigning an existing key keeps its position in the dict
        updated = current.model_copy(update=fields)
        self._products[product_id] = updated
        return updated

    def delete(self, product_id: str) -> Product:
        self.get(product_id)
        return self._products.pop(product_id)
