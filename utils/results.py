"""Explicit success/failure values returned by the weather record store."""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class StoreErrorKind(str, Enum):
    """Expected, non-exceptional failures of a store operation."""

    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Either a value or an error kind, never both."""

    value: Optional[T] = None
    error: Optional[StoreErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreErrorKind) -> "StoreResult[T]":
        return cls(error=error)
