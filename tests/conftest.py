from __future__ import annotations

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.main import create_app
from catalog_api.app.schemas.product import ProductCategory, ProductCreate
from catalog_api.app.schemas.user import UserCreate, UserRole
from catalog_api.app.services import ProductStore, UserStore


def make_user(email: str = "a@x.com", name: str = "Alice", role: UserRole = UserRole.USER) -> UserCreate:
    return UserCreate(email=email, name=name, role=role)


def make_product(
    sku: str = "RS-001",
    stock: int = 5,
    name: str = "Running Shoes",
    description: str = "Comfortable running shoes with excellent cushioning",
    category: ProductCategory = ProductCategory.SPORTS,
    price: float = 89.99,
) -> ProductCreate:
    return ProductCreate(
        name=name,
        description=description,
        price=price,
        stock=stock,
        category=category,
        sku=sku,
    )


@pytest.fixture()
def user_store() -> UserStore:
    return UserStore()


@pytest.fixture()
def product_store() -> ProductStore:
    return ProductStore()


@pytest.fixture()
def settings() -> Settings:
    return Settings(seed_data=False, api_prefix="/api", docs_url="/api-docs", openapi_url="/api/openapi.json")


@pytest.fixture()
def app(settings: Settings, user_store: UserStore, product_store: ProductStore) -> FastAPI:
    return create_app(settings=settings, user_store=user_store, product_store=product_store)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
