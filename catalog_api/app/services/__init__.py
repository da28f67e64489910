"""
Service layer: the in‑memory record stores.

Each store owns one resource collection and enforces its invariants
(unique natural key, non‑negative stock).  Stores are plain objects
created by ``create_app`` and handed to the endpoints through FastAPI
dependencies, so tests can build their own instances.
"""

from .product_service import ProductStore
from .results import StoreError, StoreErrorKind, StoreResult
from .user_service import UserStore

__all__ = ["ProductStore", "StoreError", "StoreErrorKind", "StoreResult", "UserStore"]
