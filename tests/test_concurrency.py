"""Races between threads sharing one store, and how the HTTP handlers reach it."""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List

from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.main import create_app
from catalog_api.app.schemas.product import ProductUpdate
from catalog_api.app.schemas.user import UserUpdate
from catalog_api.app.services import ProductStore, StoreErrorKind, UserStore

from .conftest import make_product, make_user

WORKERS = 16


def _run_together(count: int, action: Callable[[int], object]) -> List[object]:
    """Start ``count`` calls of ``action`` as close together as possible."""
    barrier = threading.Barrier(count)

    def call(index: int) -> object:
        barrier.wait()
        return action(index)

    with ThreadPoolExecutor(max_workers=count) as pool:
        return list(pool.map(call, range(count)))


def test_concurrent_creates_with_same_email_admit_exactly_one(user_store: UserStore) -> None:
    results = _run_together(WORKERS, lambda i: user_store.create(make_user(email="race@x.com", name=f"User {i}")))

    winners = [r for r in results if r.ok]
    losers = [r for r in results if not r.ok]
    assert len(winners) == 1
    assert all(r.error.kind is StoreErrorKind.DUPLICATE_KEY for r in losers)
    assert user_store.count() == 1


def test_concurrent_email_changes_to_same_value_admit_exactly_one(user_store: UserStore) -> None:
    ids = [user_store.create(make_user(email=f"u{i}@x.com")).value.id for i in range(WORKERS)]

    results = _run_together(WORKERS, lambda i: user_store.update(ids[i], UserUpdate(email="taken@x.com")))

    assert sum(1 for r in results if r.ok) == 1
    emails = [u.email for u in user_store.find_all()]
    assert len(emails) == len(set(emails))


def test_concurrent_sku_updates_keep_skus_unique(product_store: ProductStore) -> None:
    ids = [product_store.create(make_product(sku=f"SK-{i:03d}")).value.id for i in range(WORKERS)]

    results = _run_together(WORKERS, lambda i: product_store.update(ids[i], ProductUpdate(sku="HOT-001")))

    assert sum(1 for r in results if r.ok) == 1
    skus = [p.sku for p in product_store.find_all()]
    assert len(skus) == len(set(skus))


def test_concurrent_stock_decrements_never_oversell(product_store: ProductStore) -> None:
    product, _ = product_store.create(make_product(stock=10))

    results = _run_together(WORKERS, lambda i: product_store.update_stock(product.id, -1))

    succeeded = [r for r in results if r.ok]
    failed = [r for r in results if not r.ok]
    assert len(succeeded) == 10
    assert all(r.error.kind is StoreErrorKind.INSUFFICIENT_STOCK for r in failed)
    final = product_store.find_by_id(product.id)
    assert final.stock == 0
    assert final.is_available is False


def test_concurrent_restock_and_consume_balance_out(product_store: ProductStore) -> None:
    product, _ = product_store.create(make_product(stock=WORKERS))

    _run_together(WORKERS * 2, lambda i: product_store.update_stock(product.id, 1 if i % 2 else -1))

    assert product_store.find_by_id(product.id).stock == WORKERS


class _LoopCheckingProductStore(ProductStore):
    """Records whether each stock change ran on a thread with an event loop."""

    def __init__(self) -> None:
        super().__init__()
        self.calls_on_loop: List[bool] = []

    def update_stock(self, product_id, delta):
        try:
            asyncio.get_running_loop()
            self.calls_on_loop.append(True)
        except RuntimeError:
            self.calls_on_loop.append(False)
        return super().update_stock(product_id, delta)


class _LoopCheckingUserStore(UserStore):
    def __init__(self) -> None:
        super().__init__()
        self.calls_on_loop: List[bool] = []

    def create(self, data):
        try:
            asyncio.get_running_loop()
            self.calls_on_loop.append(True)
        except RuntimeError:
            self.calls_on_loop.append(False)
        return super().create(data)


def test_http_handlers_call_stores_off_the_event_loop(settings: Settings) -> None:
    users = _LoopCheckingUserStore()
    products = _LoopCheckingProductStore()
    product, _ = products.create(make_product(stock=3))
    app = create_app(settings=settings, user_store=users, product_store=products)

    with TestClient(app) as client:
        client.post("/api/users/", json={"email": "a@x.com", "name": "Alice", "role": "user"})
        client.patch(f"/api/products/{product.id}/stock", json={"quantity": -1})

    assert users.calls_on_loop == [False]
    assert products.calls_on_loop == [False]
