"""
Helper functions for pydantic interop.
"""

from collections.abc import Mapping
from typing import Any, Type

from pydantic import BaseModel


def is_pydantic_model(model_class: Type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    try:
        return (
            isinstance(model_class, type)
            and issubclass(model_class, BaseModel)
            and hasattr(model_class, "model_fields")
        )
    except TypeError:
        return False


def to_dict(model: BaseModel) -> dict[str, Any]:
    """Convert Pydantic model to dictionary."""
    return model.model_dump()


def as_mapping(value: Any) -> Mapping[str, Any] | None:
    """
    View a value as a field mapping.

    Mappings are returned as-is and pydantic model instances are dumped.
    Anything else yields None.
    """
    if isinstance(value, Mapping):
        return value
    if is_pydantic_model(type(value)):
        return to_dict(value)
    return None
