"""
Shared schema pieces: base model configuration and error/health bodies.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire.

    Input is accepted under either the camelCase alias or the Python
    field name.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    """Base for records held by a store.

    Records are frozen: the store replaces a record on every mutation
    instead of editing it, so an instance handed to a caller can never
    change under the store's feet or be changed by the caller.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        from_attributes=True,
    )

    id: str = Field(..., examples=["2f1b6c1e-4c1a-4f7e-9a39-6d1c2b7e8a10"])
    created_at: datetime
    updated_at: datetime


class ValidationIssue(BaseModel):
    property: str
    message: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    status: int = Field(..., examples=[404])
    message: str = Field(..., examples=["User not found"])
    errors: Optional[List[ValidationIssue]] = None
    timestamp: str
    path: str


class HealthStatus(BaseModel):
    status: str = Field("ok", examples=["ok"])
    timestamp: str
    uptime: float = Field(..., description="Seconds since the application started")


def error_body(status: int, message: str, path: str, errors: Optional[List[Any]] = None) -> dict:
    """Build an ``ErrorResponse`` payload as a plain dict."""
    body = ErrorResponse(
        status=status,
        message=message,
        errors=errors,
        timestamp=datetime.now(timezone.utc).isoformat(),
        path=path,
    )
    return body.model_dump(exclude_none=True)
