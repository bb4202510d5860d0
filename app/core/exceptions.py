"""Domain-level exception hierarchy for service and repository layers.

Every recognised business-rule violation is a ``DomainError`` carrying one
of the closed set of ``ErrorKind`` tags. Anything else that escapes a
request is treated as unclassified by the dispatcher in ``app.api.errors``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


class DomainError(Exception):
    """Base class for domain-specific failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self._message!r})"


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(DomainError):
    """Raised when input validation fails at the domain/service layer."""

    kind = ErrorKind.VALIDATION
