"""
fieldrules - composable, fail-fast validation of loosely-typed records.

Usage:
    from fieldrules import RuleValidator, EmailSchema, MinValue, MaxLength

    rules = RuleValidator()
    rules.add_rule("email", EmailSchema, MaxLength(64))
    rules.add_rule("age", MinValue(18))

    result = rules.validate({"email": "a@b.co", "age": 21})
"""

from .builder import StringValidator
from .combinators import Combine, EmailMinMaxLength, NestedField, ObjectSchema
from .context import is_strict_objects, validation_context
from .core import AllV, DictV, FieldV, V, to_validator
from .rules import RuleValidator
from .types import Err, FieldError, FieldValidator, Ok, Result
from .validators import (
    EMAIL_REGEX,
    BooleanSchema,
    EmailSchema,
    Matches,
    MaxLength,
    MaxValue,
    MinLength,
    MinValue,
    NumberSchema,
    StringNotEmpty,
    StringSchema,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "FieldError",
    "FieldValidator",
    "Result",
    # Core
    "V",
    "AllV",
    "DictV",
    "FieldV",
    "to_validator",
    # Validators
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "EmailSchema",
    "EMAIL_REGEX",
    "StringNotEmpty",
    "MinLength",
    "MaxLength",
    "MinValue",
    "MaxValue",
    "Matches",
    # Combinators
    "Combine",
    "ObjectSchema",
    "NestedField",
    "EmailMinMaxLength",
    # Builders and records
    "StringValidator",
    "RuleValidator",
    # Configuration
    "validation_context",
    "is_strict_objects",
]
