# sdk/pystore.py
import httpx
from typing import Optional, Dict, Any, List


class StoreError(Exception):
    """Raised for any non-2xx answer; carries the server's error message."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _unwrap(r: httpx.Response) -> Dict[str, Any]:
    try:
        body = r.json()
    except ValueError:
        body = None
    if r.is_success and isinstance(body, dict):
        return body
    message = body.get("message") if isinstance(body, dict) else None
    raise StoreError(r.status_code, message or r.text or r.reason_phrase)


def _product_payload(name: str, price: float, description: Optional[str],
                     category: Optional[str], in_stock: Optional[bool]) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"name": name, "price": price}
    if description is not None:
        payload["description"] = description
    if category is not None:
        payload["category"] = category
    if in_stock is not None:
        payload["inStock"] = in_stock
    return payload


class StoreClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, api_key_header: str = "x-api-key",
                 client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers: Dict[str, str] = {}
        if api_key:
            self.headers[api_key_header] = api_key
        # an injected client (e.g. fastapi's TestClient) is used as-is
        self.session = client if client is not None else httpx.Client(timeout=timeout)

    def close(self):
        self.session.close()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        r = self.session.get(f"{self.base_url}{path}", params=params, headers=self.headers)
        return _unwrap(r)

    # Read endpoints
    def list_products(self, category: Optional[str] = None, page: Optional[int] = None,
                      limit: Optional[int] = None) -> Dict[str, Any]:
        """Return the whole envelope so callers see ``page`` and ``total``."""
        params: Dict[str, Any] = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        return self._get("/api/products", params)

    def search_products(self, name: str) -> List[Dict[str, Any]]:
        return self._get("/api/products/search", {"name": name})["data"]

    def product_stats(self) -> Dict[str, int]:
        return self._get("/api/products/stats")["data"]

    def get_product(self, product_id: str) -> Dict[str, Any]:
        return self._get(f"/api/products/{product_id}")["data"]

    # Mutating endpoints (need the api key)
    def create_product(self, name: str, price: float, description: Optional[str] = None,
                       category: Optional[str] = None, in_stock: Optional[bool] = None) -> Dict[str, Any]:
        payload = _product_payload(name, price, description, category, in_stock)
        r = self.session.post(f"{self.base_url}/api/products", json=payload, headers=self.headers)
        return _unwrap(r)["data"]

    def update_product(self, product_id: str, **fields: Any) -> Dict[str, Any]:
        r = self.session.put(f"{self.base_url}/api/products/{product_id}", json=fields, headers=self.headers)
        return _unwrap(r)["data"]

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", headers=self.headers)
        return _unwrap(r)["data"]

    # Async create (used by demo_concurrent.py)
    async def create_product_async(self, name: str, price: float, description: Optional[str] = None,
                                   category: Optional[str] = None, in_stock: Optional[bool] = None,
                                   client: Optional[httpx.AsyncClient] = None) -> Dict[str, Any]:
        payload = _product_payload(name, price, description, category, in_stock)
        if client is not None:
            r = await client.post(f"{self.base_url}/api/products", json=payload, headers=self.headers)
            return _unwrap(r)["data"]
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            r = await ac.post(f"{self.base_url}/api/products", json=payload, headers=self.headers)
            return _unwrap(r)["data"]
