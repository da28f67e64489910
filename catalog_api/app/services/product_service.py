"""
Business logic for products.

``ProductStore`` mirrors ``UserStore``: an insertion‑ordered map of
records, an index from SKU to id, and a single re‑entrant lock held for
every read and for the whole check‑then‑act sequence of every write.
On top of CRUD it offers text search, availability filtering and
stock adjustment.

``update_stock`` always recomputes ``is_available`` as ``stock > 0``.
``update`` is a plain merge: it never derives ``is_available``, so a
stock or availability set there is stored as given, even when the two
disagree.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from ..schemas.product import Product, ProductCategory, ProductCreate, ProductUpdate
from .records import new_id, next_timestamp
from .results import StoreErrorKind, StoreResult

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"
DUPLICATE_SKU = "Product with this SKU already exists"
INSUFFICIENT_STOCK = "Insufficient stock"
NEGATIVE_STOCK = "Stock cannot be negative"


class ProductStore:
    """In‑memory store of product records keyed by id, unique by SKU."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: Dict[str, Product] = {}
        self._ids_by_sku: Dict[str, str] = {}
        self._lock = threading.RLock()
        for product in products:
            if product.sku in self._ids_by_sku:
                raise ValueError(f"Duplicate SKU in initial products: {product.sku}")
            if product.stock < 0:
                raise ValueError(f"Negative stock in initial product {product.sku}")
            self._products[product.id] = product
            self._ids_by_sku[product.sku] = product.id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_all(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())

    def find_by_id(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return self._products.get(product_id)

    def find_by_sku(self, sku: str) -> Optional[Product]:
        with self._lock:
            product_id = self._ids_by_sku.get(sku)
            return self._products.get(product_id) if product_id is not None else None

    def find_by_category(self, category: ProductCategory) -> List[Product]:
        with self._lock:
            return [p for p in self._products.values() if p.category == category]

    def find_available(self) -> List[Product]:
        with self._lock:
            return [p for p in self._products.values() if p.is_available and p.stock > 0]

    def search(self, text: str) -> List[Product]:
        """Case‑insensitive substring match against name or description."""
        needle = text.lower()
        with self._lock:
            return [
                p
                for p in self._products.values()
                if needle in p.name.lower() or needle in p.description.lower()
            ]

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, data: ProductCreate) -> StoreResult[Product]:
        if data.stock < 0:
            logger.warning("Rejected product %s with negative stock %s", data.sku, data.stock)
            return StoreResult.failure(StoreErrorKind.INVALID_STATE, NEGATIVE_STOCK)
        with self._lock:
            if data.sku in self._ids_by_sku:
                logger.warning("Rejected product creation: SKU %s already exists", data.sku)
                return StoreResult.failure(StoreErrorKind.DUPLICATE_KEY, DUPLICATE_SKU)
            now = next_timestamp()
            product = Product(
                id=new_id(),
                name=data.name,
                description=data.description,
                price=data.price,
                stock=data.stock,
                category=data.category,
                sku=data.sku,
                is_available=True,
                created_at=now,
                updated_at=now,
            )
            self._products[product.id] = product
            self._ids_by_sku[product.sku] = product.id
        logger.info("Created product %s (%s)", product.id, product.sku)
        return StoreResult.success(product)

    def update(self, product_id: str, data: ProductUpdate) -> StoreResult[Product]:
        """Merge the fields present in ``data`` into an existing product."""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if changes.get("stock", 0) < 0:
            logger.warning("Rejected update of product %s with negative stock %s", product_id, changes["stock"])
            return StoreResult.failure(StoreErrorKind.INVALID_STATE, NEGATIVE_STOCK)
        with self._lock:
            current = self._products.get(product_id)
            if current is None:
                return StoreResult.failure(StoreErrorKind.NOT_FOUND, PRODUCT_NOT_FOUND)
            new_sku = changes.get("sku", current.sku)
            if new_sku != current.sku and new_sku in self._ids_by_sku:
                logger.warning("Rejected update of product %s: SKU %s already exists", product_id, new_sku)
                return StoreResult.failure(StoreErrorKind.DUPLICATE_KEY, DUPLICATE_SKU)
            changes["updated_at"] = next_timestamp(current.updated_at)
            updated = current.model_copy(update=changes)
            self._products[product_id] = updated
            if updated.sku != current.sku:
                del self._ids_by_sku[current.sku]
                self._ids_by_sku[updated.sku] = product_id
        logger.info("Updated product %s: %s", product_id, sorted(k for k in changes if k != "updated_at"))
        return StoreResult.success(updated)

    def update_stock(self, product_id: str, delta: int) -> StoreResult[Product]:
        """Add ``delta`` to the stock of a product, atomically.

        A negative delta consumes stock, a positive one restocks.  If the
        result would drop below zero nothing is written and
        ``INSUFFICIENT_STOCK`` is returned.
        """
        with self._lock:
            current = self._products.get(product_id)
            if current is None:
                return StoreResult.failure(StoreErrorKind.NOT_FOUND, PRODUCT_NOT_FOUND)
            new_stock = current.stock + delta
            if new_stock < 0:
                logger.warning(
                    "Rejected stock change of %s for product %s: only %s in stock",
                    delta,
                    product_id,
                    current.stock,
                )
                return StoreResult.failure(StoreErrorKind.INSUFFICIENT_STOCK, INSUFFICIENT_STOCK)
            updated = current.model_copy(
                update={
                    "stock": new_stock,
                    "is_available": new_stock > 0,
                    "updated_at": next_timestamp(current.updated_at),
                }
            )
            self._products[product_id] = updated
        logger.info("Stock of product %s changed by %s to %s", product_id, delta, new_stock)
        return StoreResult.success(updated)

    def delete(self, product_id: str) -> StoreResult[None]:
        with self._lock:
            product = self._products.pop(product_id, None)
            if product is None:
                return StoreResult.failure(StoreErrorKind.NOT_FOUND, PRODUCT_NOT_FOUND)
            del self._ids_by_sku[product.sku]
        logger.info("Deleted product %s", product_id)
        return StoreResult.success()
