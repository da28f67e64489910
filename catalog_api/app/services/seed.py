"""Demo records loaded at startup when ``SEED_DATA`` is enabled."""

from typing import List

from ..schemas.product import Product, ProductCategory
from ..schemas.user import User, UserRole
from .records import new_id, utcnow


def default_users() -> List[User]:
    now = utcnow()
    return [
        User(
            id=new_id(),
            email="admin@example.com",
            name="Admin User",
            role=UserRole.ADMIN,
            created_at=now,
            updated_at=now,
        ),
        User(
            id=new_id(),
            email="john.doe@example.com",
            name="John Doe",
            role=UserRole.USER,
            created_at=now,
            updated_at=now,
        ),
    ]


def default_products() -> List[Product]:
    now = utcnow()
    rows = [
        (
            "Wireless Headphones",
            "High-quality wireless headphones with noise cancellation",
            199.99,
            50,
            ProductCategory.ELECTRONICS,
            "WH-001",
        ),
        (
            "Running Shoes",
            "Comfortable running shoes with excellent cushioning",
            89.99,
            100,
            ProductCategory.SPORTS,
            "RS-001",
        ),
        (
            "Programming Book",
            "Learn TypeScript from beginner to advanced level",
            49.99,
            30,
            ProductCategory.BOOKS,
            "BK-001",
        ),
    ]
    return [
        Product(
            id=new_id(),
            name=name,
            description=description,
            price=price,
            stock=stock,
            category=category,
            sku=sku,
            is_available=True,
            created_at=now,
            updated_at=now,
        )
        for name, description, price, stock, category, sku in rows
    ]
