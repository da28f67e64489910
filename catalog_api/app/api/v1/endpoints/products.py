"""
Product endpoints.

Listing accepts ``search`` (case‑insensitive match on name or
description) or ``category``; when both are given, ``search`` wins.
Stock is adjusted through ``PATCH /{id}/stock`` with a signed
``quantity``; a decrement below zero is rejected with 400 and leaves
the product untouched.  As with users, handlers are plain functions run
in FastAPI's threadpool.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog_api.app.api.deps import get_product_store
from catalog_api.app.core.errors import unwrap
from catalog_api.app.schemas.common import ErrorResponse
from catalog_api.app.schemas.product import (
    Product,
    ProductCategory,
    ProductCreate,
    ProductUpdate,
    StockAdjustment,
)
from catalog_api.app.services.product_service import PRODUCT_NOT_FOUND, ProductStore

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input data"}}


@router.get("/", response_model=List[Product], summary="Get all products")
def list_products(
    category: Optional[ProductCategory] = Query(None, description="Only return products in this category"),
    search: Optional[str] = Query(None, description="Match against name or description"),
    store: ProductStore = Depends(get_product_store),
) -> List[Product]:
    if search:
        return store.search(search)
    if category:
        return store.find_by_category(category)
    return store.find_all()


@router.get("/available", response_model=List[Product], summary="Get available products")
def list_available_products(store: ProductStore = Depends(get_product_store)) -> List[Product]:
    """Products flagged available that still have stock."""
    return store.find_available()


@router.get("/{product_id}", response_model=Product, summary="Get product by ID", responses=_NOT_FOUND)
def get_product(product_id: str, store: ProductStore = Depends(get_product_store)) -> Product:
    product = store.find_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)
    return product


@router.post(
    "/",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    responses=_BAD_REQUEST,
)
def create_product(payload: ProductCreate, store: ProductStore = Depends(get_product_store)) -> Product:
    return unwrap(store.create(payload))


@router.put("/{product_id}", response_model=Product, summary="Update a product", responses={**_NOT_FOUND, **_BAD_REQUEST})
@router.patch("/{product_id}", response_model=Product, summary="Partially update a product", responses={**_NOT_FOUND, **_BAD_REQUEST})
def update_product(
    product_id: str,
    payload: ProductUpdate,
    store: ProductStore = Depends(get_product_store),
) -> Product:
    return unwrap(store.update(product_id, payload))


@router.patch(
    "/{product_id}/stock",
    response_model=Product,
    summary="Update product stock",
    responses={**_NOT_FOUND, 400: {"model": ErrorResponse, "description": "Insufficient stock or invalid quantity"}},
)
def update_product_stock(
    product_id: str,
    payload: StockAdjustment,
    store: ProductStore = Depends(get_product_store),
) -> Product:
    """Add ``quantity`` to the stock (negative values consume stock)."""
    return unwrap(store.update_stock(product_id, payload.quantity))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    responses=_NOT_FOUND,
)
def delete_product(product_id: str, store: ProductStore = Depends(get_product_store)) -> None:
    unwrap(store.delete(product_id))
    return None
