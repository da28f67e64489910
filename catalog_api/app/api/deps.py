"""
FastAPI dependencies resolving the stores attached to the application.

``create_app`` puts one ``UserStore`` and one ``ProductStore`` on
``app.state``; endpoints receive them through ``Depends`` instead of
importing module‑level instances.
"""

from fastapi import Request

from catalog_api.app.services import ProductStore, UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_product_store(request: Request) -> ProductStore:
    return request.app.state.product_store
