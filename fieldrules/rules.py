"""
RuleValidator - validates whole records against per-field rule lists.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from .lib.model_helpers import as_mapping
from .types import Err, FieldError, FieldValidator, Ok, Result

logger = logging.getLogger(__name__)


class RuleValidator:
    """
    Top-level record validator.

    Rules are registered per field with add_rule() and evaluated in
    registration order. Every registered field is required; the first missing
    field or failing rule is reported.

    Usage:
        rules = RuleValidator()
        rules.add_rule("email", EmailSchema, MaxLength(64))
        rules.add_rule("age", MinValue(18))

        rules.validate({"email": "a@b.co", "age": 16})
        # Err(FieldError("field 'age': must be greater than or equal to 18"))
    """

    def __init__(self) -> None:
        self._rules: dict[str, list[FieldValidator]] = {}

    def __repr__(self) -> str:
        return f"RuleValidator(fields={self.fields!r})"

    @property
    def rules(self) -> Mapping[str, tuple[FieldValidator, ...]]:
        """Read-only view of the registered rule lists."""
        return MappingProxyType({k: tuple(v) for k, v in self._rules.items()})

    @property
    def fields(self) -> list[str]:
        return list(self._rules)

    def add_rule(self, field: str, *validators: FieldValidator) -> None:
        """Append validators to the rule list of `field`."""
        for validator in validators:
            if not callable(validator):
                raise TypeError(
                    f"Rule for field '{field}' must be callable, got {type(validator).__name__}"
                )
        self._rules.setdefault(field, []).extend(validators)
        logger.debug(
            "Registered %d rule(s) for field '%s' (%d total)",
            len(validators),
            field,
            len(self._rules[field]),
        )

    def validate(self, record: Any) -> Result:
        """
        Validate a record against the registered rules.

        Args:
            record: A mapping of field names to values, or a pydantic model

        Returns:
            Ok(record) if every field is present and passes its rules
            Err(FieldError) describing the first failure

        Raises:
            TypeError: If the record is neither a mapping nor a pydantic model
        """
        data = as_mapping(record)
        if data is None:
            raise TypeError(
                f"Record must be a mapping or pydantic model, got {type(record).__name__}"
            )

        for field, rules in self._rules.items():
            if field not in data:
                logger.debug("Record is missing field '%s'", field)
                return Err(FieldError(f"field '{field}' not found", (field,)))

            value = data[field]
            for rule in rules:
                result = rule(value)
                if isinstance(result, Err):
                    logger.debug("Field '%s' failed: %s", field, result.error.message)
                    return Err(result.error.within(field))

        return Ok(record)

    def check(self, record: Any) -> Any:
        """Validate a record, raising the FieldError on failure."""
        result = self.validate(record)
        if isinstance(result, Err):
            raise result.error
        return record

    __call__ = validate
