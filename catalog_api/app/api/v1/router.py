"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers (users, products) under a
unified prefix chosen by ``create_app``.  The health route is not part
of it; it is mounted at the application root.
"""

from fastapi import APIRouter

from .endpoints import products, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
