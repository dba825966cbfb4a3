"""
Internal outcome of store writes made by mutations.

Mutations expose only a boolean to clients; the error kind is kept here so
it can be logged and asserted on.
"""

from dataclasses import dataclass
from enum import Enum

from ..store.base import DocumentNotFoundError, StoreUnavailableError
from .types.collection import MutationResult


class WriteErrorKind(str, Enum):
    """Why a favorites write failed."""

    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class WriteOutcome:
    success: bool
    error: WriteErrorKind | None = None
    detail: str | None = None

    @classmethod
    def ok(cls) -> "WriteOutcome":
        return cls(success=True)

    @classmethod
    def failed(cls, error: WriteErrorKind, detail: str | None = None) -> "WriteOutcome":
        return cls(success=False, error=error, detail=detail)

    @classmethod
    def from_exception(cls, exc: Exception) -> "WriteOutcome":
        if isinstance(exc, DocumentNotFoundError):
            kind = WriteErrorKind.NOT_FOUND
        elif isinstance(exc, StoreUnavailableError):
            kind = WriteErrorKind.UNAVAILABLE
        else:
            kind = WriteErrorKind.UNKNOWN
        return cls.failed(kind, str(exc))

    def to_mutation_result(self) -> MutationResult:
        return MutationResult(success=self.success)
