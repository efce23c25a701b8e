"""
Fluent builder for string validators.

    email_rule = StringValidator().non_empty().min(3).email()
    email_rule.validate("a@b.co")   # Ok("a@b.co")
    email_rule.validate(42)         # Err("must be a string")

The type check happens once, in validate(); the accumulated checks only ever
see strings.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from .core import V
from .types import Result
from .validators import EMAIL_REGEX, byte_length, check_bound

logger = logging.getLogger(__name__)

StringCheck = Callable[[str], str | None]


class StringValidator:
    """Accumulates string checks, applied in append order and fail-fast."""

    def __init__(self) -> None:
        self._checks: list[StringCheck] = []
        self._frozen = False
        self._built: V | None = None

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"StringValidator(checks={len(self._checks)}, {state})"

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _append(self, check: StringCheck) -> StringValidator:
        if self._frozen:
            raise RuntimeError("StringValidator cannot be extended after validation")
        self._checks.append(check)
        return self

    def email(self) -> StringValidator:
        def check(s: str) -> str | None:
            if EMAIL_REGEX.fullmatch(s) is None:
                return "invalid email format"
            return None

        return self._append(check)

    def non_empty(self) -> StringValidator:
        def check(s: str) -> str | None:
            if s == "":
                return "cannot be empty"
            return None

        return self._append(check)

    def min(self, min_length: int) -> StringValidator:
        check_bound("min_length", min_length)

        def check(s: str) -> str | None:
            if byte_length(s) < min_length:
                return f"must have a minimum length of {min_length}"
            return None

        return self._append(check)

    def max(self, max_length: int) -> StringValidator:
        check_bound("max_length", max_length)

        def check(s: str) -> str | None:
            if byte_length(s) > max_length:
                return f"must have a maximum length of {max_length}"
            return None

        return self._append(check)

    def matches(self, pattern: str, message: str | None = None) -> StringValidator:
        compiled = re.compile(pattern)
        failure = message or f"must match pattern: {compiled.pattern}"

        def check(s: str) -> str | None:
            if compiled.fullmatch(s) is None:
                return failure
            return None

        return self._append(check)

    def build(self) -> V:
        """Finalize the builder and return an immutable field validator."""
        if self._built is None:
            self._frozen = True
            logger.debug("StringValidator finalized with %d checks", len(self._checks))
            checks = tuple(self._checks)

            def check(x: Any) -> str | None:
                if not isinstance(x, str):
                    return "must be a string"
                for string_check in checks:
                    failure = string_check(x)
                    if failure is not None:
                        return failure
                return None

            self._built = V(check=check)
        return self._built

    def validate(self, value: Any) -> Result:
        """Validate `value`; the first call finalizes the builder."""
        return self.build()(value)

    __call__ = validate
