"""
Pydantic models for user data.

``UserCreate`` and ``UserUpdate`` are the validated request bodies;
``User`` is the record stored by ``UserStore`` and returned by the API.
Emails are checked with pydantic's ``EmailStr``; the store compares them
exactly as validated, with no case folding of the local part.
"""

from enum import Enum
from typing import Optional

from pydantic import EmailStr, Field

from .common import CamelModel, RecordModel


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


class UserCreate(CamelModel):
    """Schema for registering a user."""

    email: EmailStr = Field(..., examples=["jane.doe@example.com"])
    name: str = Field(..., min_length=2, examples=["Jane Doe"])
    role: UserRole = Field(..., examples=[UserRole.USER])


class UserUpdate(CamelModel):
    """Schema for updating a user.

    All fields are optional; only provided values will be updated.
    """

    email: Optional[EmailStr] = None
    name: Optional[str] = Field(None, min_length=2)
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None


class User(RecordModel):
    """A user record as held by the store and returned by the API."""

    email: str = Field(..., examples=["admin@example.com"])
    name: str = Field(..., examples=["Admin User"])
    role: UserRole
    is_active: bool = True
