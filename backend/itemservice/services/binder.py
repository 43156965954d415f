"""Binder — turns submitted raw values into a typed target plus a report.

Binding runs before the engine. Each field converts on its own, so one bad
value does not stop the others from binding; every failure is recorded as a
binding-failure field error holding exactly what was submitted.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError as PydanticValidationError

from itemservice.validators.codes import MessageCodesResolver, message_codes_resolver
from itemservice.validators.models import ErrorCode
from itemservice.validators.report import ValidationReport
from itemservice.validators.shapes import declared_fields, default_object_name

logger = structlog.get_logger()


@dataclass
class BindingResult:
    """The bound target and the report its binding failures went into."""

    target: BaseModel
    report: ValidationReport


def bind(
    model: type[BaseModel],
    raw: Mapping[str, Any],
    object_name: Optional[str] = None,
    report: Optional[ValidationReport] = None,
    resolver: Optional[MessageCodesResolver] = None,
) -> BindingResult:
    """Bind ``raw`` onto a new ``model`` instance, field by field.

    Blank strings submitted for non-string fields bind to None. Keys the
    model does not declare are ignored. A field that fails conversion stays
    None on the target and gets a ``typeMismatch`` error in the report.

    Args:
        model: Pydantic model to construct
        raw: Submitted values keyed by field name
        object_name: Name errors are reported under; taken from ``report``
            when one is given, else derived from the model
        report: Existing report to append binding failures to; it adopts
            the bound target if it has none. A fresh report when omitted.
        resolver: Code resolver for the ``typeMismatch`` chain

    Returns:
        BindingResult with the target and its report
    """
    if object_name is None:
        object_name = report.object_name if report is not None else default_object_name(model)
    resolver = resolver or message_codes_resolver
    fields = declared_fields(model)

    values: dict[str, Any] = {}
    failures: list[tuple[str, Any, Any]] = []

    for field, field_type in fields.items():
        if field not in raw:
            continue
        value = raw[field]
        if _is_blank_for(value, field_type):
            values[field] = None
            continue
        try:
            values[field] = _adapter(model, field).validate_python(value)
        except PydanticValidationError as e:
            logger.info(
                "binding_failed",
                object_name=object_name,
                field=field,
                rejected_value=repr(value),
                reason=e.errors()[0]["type"] if e.errors() else "unknown",
            )
            failures.append((field, value, field_type))

    target = model(**values)
    if report is None:
        report = ValidationReport.for_target(target, object_name, resolver)
    elif report.target is None:
        report.target = target

    for field, value, field_type in failures:
        report.add_field_error(
            field,
            value,
            True,
            resolver.resolve_field_codes(ErrorCode.TYPE_MISMATCH, object_name, field, field_type),
            (field,),
        )

    return BindingResult(target=target, report=report)


def _is_blank_for(value: Any, field_type: Any) -> bool:
    return field_type is not str and isinstance(value, str) and not value.strip()


_adapters: dict[tuple[type, str], TypeAdapter] = {}


def _adapter(model: type[BaseModel], field: str) -> TypeAdapter:
    """TypeAdapter for one declared field, built once per model and field."""
    key = (model, field)
    if key not in _adapters:
        _adapters[key] = TypeAdapter(model.model_fields[field].annotation)
    return _adapters[key]
