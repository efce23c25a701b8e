"""
Type definitions for fieldrules.

Provides a minimal Result type (Ok/Err), the FieldError value and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing the validated value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


class FieldError(ValueError):
    """
    A single validation failure.

    Validators return it wrapped in Err rather than raising it; callers that
    prefer exceptions may raise it directly.

    Attributes:
        message: Human readable description, e.g. "must be a string"
        path: Field names leading from the record root to the failing value
    """

    def __init__(self, message: str, path: Path = ()):
        super().__init__(message)
        self.message = message
        self.path = path

    def __repr__(self) -> str:
        return f"FieldError({self.message!r}, path={self.path!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldError):
            return self.message == other.message and self.path == other.path
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.message, self.path))

    def under(self, key: str | int) -> FieldError:
        """Same message, located one level deeper below `key`."""
        return FieldError(self.message, (key, *self.path))

    def within(self, field: str) -> FieldError:
        """Prefix the message with the owning record field."""
        return FieldError(f"field '{field}': {self.message}", (field, *self.path))


# Type aliases
Path = tuple[str | int, ...]
Result = Ok[Any] | Err[FieldError]
CheckFn = Callable[[Any], str | None]
FieldValidator = Callable[[Any], Result]
