"""
Combinators building composite validators out of field validators.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .core import AllV, DictV, FieldV, to_validator
from .types import FieldValidator
from .validators import EmailSchema, MaxLength, MinLength, StringSchema


def _ensure_callable(v: Any) -> FieldValidator:
    if not callable(v):
        raise TypeError(f"Validator must be callable, got {type(v).__name__}")
    return v


def Combine(*validators: FieldValidator) -> AllV:
    """
    Run validators in order against the same value, stopping at the first Err.

    Combine() with no validators accepts everything.

    Usage:
        Combine(StringSchema, MinLength(3), MaxLength(10))
    """
    return AllV(validators=tuple(_ensure_callable(v) for v in validators))


def ObjectSchema(fields: Mapping[str, Any]) -> DictV:
    """
    Validate a nested mapping against named, required field validators.

    Nested dicts in `fields` become nested object schemas.

    Usage:
        ObjectSchema({
            "name": StringSchema,
            "address": {"city": Combine(StringSchema, StringNotEmpty)},
        })
    """
    converted: dict[str, FieldValidator] = {}
    for key, v in fields.items():
        converted[key] = to_validator(v) if isinstance(v, dict) else _ensure_callable(v)
    return DictV(fields=converted)


def NestedField(name: str, validator: FieldValidator) -> FieldV:
    """
    Validate one key of a mapping only when it is present.

    Unlike ObjectSchema, a missing key (or a non-mapping input) passes.
    """
    return FieldV(name=name, validator=_ensure_callable(validator))


def EmailMinMaxLength(min_length: int, max_length: int) -> AllV:
    """Optional string holding an email address within length bounds."""
    return Combine(
        StringSchema,
        EmailSchema,
        MinLength(min_length),
        MaxLength(max_length),
    )
