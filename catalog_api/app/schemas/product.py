"""
Pydantic models for product data.

Field constraints mirror what the catalog accepts at the HTTP edge:
names of 2-100 characters, descriptions of 10-500, SKUs of 3-20, a
strictly positive price and a stock that is never negative.  The store
re-checks the stock bound itself because structural validation can be
bypassed by code that builds these models without validating.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from .common import CamelModel, RecordModel


class ProductCategory(str, Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    BOOKS = "books"
    HOME = "home"
    SPORTS = "sports"
    TOYS = "toys"
    OTHER = "other"


class ProductCreate(CamelModel):
    """Schema for creating a product."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Wireless Headphones"])
    description: str = Field(
        ...,
        min_length=10,
        max_length=500,
        examples=["High-quality wireless headphones with noise cancellation"],
    )
    price: float = Field(..., gt=0, examples=[199.99])
    stock: int = Field(..., ge=0, examples=[50])
    category: ProductCategory = Field(..., examples=[ProductCategory.ELECTRONICS])
    sku: str = Field(..., min_length=3, max_length=20, examples=["WH-001"])


class ProductUpdate(CamelModel):
    """Schema for updating a product.

    All fields are optional; only provided values will be updated.
    ``is_available`` may be set independently of ``stock``.
    """

    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, min_length=10, max_length=500)
    price: Optional[float] = Field(None, gt=0)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[ProductCategory] = None
    sku: Optional[str] = Field(None, min_length=3, max_length=20)
    is_available: Optional[bool] = None


class StockAdjustment(CamelModel):
    """Body of a stock adjustment: negative consumes, positive restocks."""

    quantity: int = Field(..., examples=[-1])


class Product(RecordModel):
    """A product record as held by the store and returned by the API."""

    name: str
    description: str
    price: float
    stock: int
    category: ProductCategory
    sku: str
    is_available: bool = True
