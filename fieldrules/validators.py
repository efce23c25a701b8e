"""
Built-in validators for fieldrules.

Type guards (StringSchema, NumberSchema, BooleanSchema, EmailSchema) treat None
as an absent optional field and let it pass. Constraint validators are built by
factory functions returning V instances.
"""

from __future__ import annotations

import re
from typing import Any

from .core import V

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_integer(x: Any) -> bool:
    # bool is an int subclass but never a JSON number
    return isinstance(x, int) and not isinstance(x, bool)


def is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def byte_length(s: str) -> int:
    """Length of `s` in UTF-8 bytes; lone surrogates count as 3 bytes."""
    return len(s.encode("utf-8", "surrogatepass"))


def check_bound(name: str, n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must be >= 0, got {n}")


def check_number(name: str, n: float) -> None:
    if not is_number(n):
        raise TypeError(f"{name} must be a number, got {type(n).__name__}")


# Type guards


def _string_or_nil(x: Any) -> str | None:
    if x is None or isinstance(x, str):
        return None
    return "must be a string or nil"


def _number_or_nil(x: Any) -> str | None:
    if x is None or is_number(x):
        return None
    return "must be a number or nil"


def _boolean_or_nil(x: Any) -> str | None:
    if x is None or isinstance(x, bool):
        return None
    return "must be a boolean or nil"


def _email_or_nil(x: Any) -> str | None:
    if x is None or x == "":
        return None
    if not isinstance(x, str):
        return "must be a string or nil"
    if EMAIL_REGEX.fullmatch(x) is None:
        return "invalid email format"
    return None


def _not_empty(x: Any) -> str | None:
    if not isinstance(x, str):
        return "must be a string"
    if x == "":
        return "cannot be empty"
    return None


StringSchema = V(check=_string_or_nil)
NumberSchema = V(check=_number_or_nil)
BooleanSchema = V(check=_boolean_or_nil)
EmailSchema = V(check=_email_or_nil)
StringNotEmpty = V(check=_not_empty)


# Factories


def MinLength(n: int) -> V:
    """
    Validate a string is at least `n` bytes long.

    Usage:
        MinLength(3)("abc")   # Ok
        MinLength(3)(123)     # Err("must be a string")
    """
    check_bound("min_length", n)

    def check(x: Any) -> str | None:
        if not isinstance(x, str):
            return "must be a string"
        if byte_length(x) < n:
            return f"must have a minimum length of {n}"
        return None

    return V(check=check)


def MaxLength(n: int) -> V:
    """Validate a string is at most `n` bytes long."""
    check_bound("max_length", n)

    def check(x: Any) -> str | None:
        if not isinstance(x, str):
            return "must be a string"
        if byte_length(x) > n:
            return f"must have a maximum length of {n}"
        return None

    return V(check=check)


def MinValue(n: int) -> V:
    """
    Validate an integer is greater than or equal to `n`.

    Floats are rejected with "must be an integer", even integral ones like 18.0.
    """
    if not is_integer(n):
        raise TypeError(f"min_value must be an int, got {type(n).__name__}")

    def check(x: Any) -> str | None:
        if not is_integer(x):
            return "must be an integer"
        if x < n:
            return f"must be greater than or equal to {n}"
        return None

    return V(check=check)


def MaxValue(n: float) -> V:
    """Validate a number (int or float) is less than or equal to `n`."""
    check_number("max_value", n)

    def check(x: Any) -> str | None:
        if not is_number(x):
            return "must be a number"
        if x > n:
            return f"must be less than or equal to {n:f}"
        return None

    return V(check=check)


def Matches(pattern: str | re.Pattern[str], message: str | None = None) -> V:
    """
    Validate string fully matches regex pattern.

    Usage:
        Matches(r"[a-z]+")
        Matches(r"\\d{3}-\\d{4}", "invalid phone format")
    """
    compiled = re.compile(pattern)

    def check(x: Any) -> str | None:
        if not isinstance(x, str):
            return "must be a string"
        if compiled.fullmatch(x) is None:
            return f"must match pattern: {compiled.pattern}"
        return None

    return V(check=check, message=message)
