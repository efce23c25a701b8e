"""
Core validator classes for fieldrules.

Provides V, AllV, DictV and FieldV dataclasses. Every one of them honours the
field validator contract: called with an untyped value, it returns Ok(value)
or Err(FieldError).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from .context import is_strict_objects
from .lib.model_helpers import as_mapping
from .types import CheckFn, Err, FieldError, FieldValidator, Ok, Result


@dataclass(frozen=True, slots=True)
class V:
    """
    Immutable atomic validator.

    Wraps a check function returning a failure message (or None when the
    value is acceptable) and turns it into an Ok/Err result.
    """

    check: CheckFn
    message: str | None = None

    def __call__(self, value: Any) -> Result:
        try:
            failure = self.check(value)
        except Exception as e:
            return Err(FieldError(f"validation error: {e}"))

        if failure is None:
            return Ok(value)
        return Err(FieldError(self.message or failure))

    def __and__(self, other: Any) -> AllV:
        """
        Combine with AND logic: both must pass, left side checked first.

        Usage:
            StringSchema & MinLength(3)
        """
        return AllV(validators=(self, to_validator(other)))

    def __rand__(self, other: Any) -> AllV:
        return AllV(validators=(to_validator(other), self))

    def with_message(self, msg: str) -> V:
        """Return new validator reporting `msg` on failure."""
        return V(check=self.check, message=msg)


@dataclass(frozen=True, slots=True)
class AllV:
    """Conjunction of validators, evaluated in order and fail-fast."""

    validators: tuple[FieldValidator, ...] = ()

    def __call__(self, value: Any) -> Result:
        for validator in self.validators:
            result = validator(value)
            if isinstance(result, Err):
                return result
        return Ok(value)

    def __and__(self, other: Any) -> AllV:
        return AllV(validators=(*self.validators, to_validator(other)))

    def __rand__(self, other: Any) -> AllV:
        return AllV(validators=(to_validator(other), *self.validators))


@dataclass(frozen=True, slots=True)
class DictV:
    """
    Validator for nested mappings with required, named field validators.

    A key missing from the input fails; a non-mapping input passes unless
    strict object schemas are enabled via validation_context().
    """

    fields: Mapping[str, FieldValidator]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash(tuple(self.fields.items()))

    def __call__(self, value: Any) -> Result:
        data = as_mapping(value)
        if data is None:
            if is_strict_objects():
                return Err(FieldError("must be an object"))
            return Ok(value)

        for key, validator in self.fields.items():
            if key not in data:
                return Err(FieldError(f"field '{key}' not found", (key,)))

            result = validator(data[key])
            if isinstance(result, Err):
                return Err(result.error.under(key))

        return Ok(value)


@dataclass(frozen=True, slots=True)
class FieldV:
    """Validator for a single optional key of a mapping."""

    name: str
    validator: FieldValidator

    def __call__(self, value: Any) -> Result:
        data = as_mapping(value)
        if data is None or self.name not in data:
            return Ok(value)

        result = self.validator(data[self.name])
        if isinstance(result, Err):
            return Err(result.error.under(self.name))
        return Ok(value)


def to_validator(v: Any) -> FieldValidator:
    """
    Coerce a value to a field validator.

    Conversion rules:
        V | AllV | DictV | FieldV -> pass through
        dict -> DictV with recursive conversion
        Callable -> used as-is (it must return Ok or Err)
    """
    if isinstance(v, (V, AllV, DictV, FieldV)):
        return v

    if isinstance(v, dict):
        return DictV(fields={k: to_validator(val) for k, val in v.items()})

    if callable(v):
        return v

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")
