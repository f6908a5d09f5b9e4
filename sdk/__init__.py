from .pystore import StoreClient, StoreError

__all__ = ["StoreClient", "StoreError"]
