"""Outcome values returned by store mutations.

Stores never raise for expected failures (unknown id, taken natural key,
not enough stock).  They return a ``StoreResult`` carrying either the
committed record or a ``StoreError`` naming what went wrong, and the
HTTP layer decides how to report it.  A result unpacks like the
``(data, error)`` pairs returned by the API client::

    user, error = store.create(payload)
    if error:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class StoreErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    DUPLICATE_KEY = "duplicate_key"
    INSUFFICIENT_STOCK = "insufficient_stock"
    # The store received a value the validation layer should have rejected.
    INVALID_STATE = "invalid_state"


@dataclass(frozen=True)
class StoreError:
    kind: StoreErrorKind
    message: str


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: StoreErrorKind, message: str) -> "StoreResult[T]":
        return cls(error=StoreError(kind=kind, message=message))

    def __iter__(self) -> Iterator:
        yield self.value
        yield self.error
