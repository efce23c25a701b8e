"""
Context manager for validation configuration (e.g., strict object schemas).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict object schemas
_strict_objects: ContextVar[bool] = ContextVar("strict_objects", default=False)


def is_strict_objects() -> bool:
    """Check if strict object schemas are currently enabled."""
    return _strict_objects.get()


@contextmanager
def validation_context(*, strict_objects: bool = False):
    """
    Context manager for validation configuration.

    Args:
        strict_objects: If True, ObjectSchema validators fail with
                        "must be an object" on non-mapping input instead of
                        silently passing it.

    Example:
        from fieldrules import ObjectSchema, StringSchema, validation_context

        address = ObjectSchema({"city": StringSchema})

        address("not a dict")  # Ok - non-mappings pass by default

        with validation_context(strict_objects=True):
            address("not a dict")  # Err("must be an object")
    """
    token = _strict_objects.set(strict_objects)
    try:
        yield
    finally:
        _strict_objects.reset(token)
