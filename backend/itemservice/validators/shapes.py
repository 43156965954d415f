"""Declared shape of a target type: field names and their value types."""

import dataclasses
import types
from typing import Any, Union, get_args, get_origin, get_type_hints

from itemservice.validators.exceptions import ConstraintConfigurationError


def unwrap_optional(annotation: Any) -> Any:
    """``Optional[int]`` and ``int | None`` both become ``int``."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def declared_fields(model_type: type) -> dict[str, Any]:
    """Map each declared field of a pydantic model or dataclass to its type."""
    model_fields = getattr(model_type, "model_fields", None)
    if model_fields is not None:
        return {name: unwrap_optional(info.annotation) for name, info in model_fields.items()}

    if dataclasses.is_dataclass(model_type):
        hints = get_type_hints(model_type)
        return {f.name: unwrap_optional(hints.get(f.name)) for f in dataclasses.fields(model_type)}

    raise ConstraintConfigurationError(
        f"'{model_type.__name__}' is neither a pydantic model nor a dataclass"
    )


def default_object_name(model_type: type) -> str:
    """``Item`` -> ``item``, ``ItemUpdateForm`` -> ``itemUpdateForm``."""
    name = model_type.__name__
    return name[:1].lower() + name[1:]
