"""Validation report — the per-call accumulator of field and object errors.

A report is created for one validation call and never shared. It only ever
grows; nothing in it raises for a rule violation.
"""

from typing import Any, Optional, Sequence, Union

from pydantic import BaseModel, Field, PrivateAttr

from itemservice.validators.codes import MessageCodesResolver, message_codes_resolver
from itemservice.validators.exceptions import ConstraintConfigurationError
from itemservice.validators.models import ErrorCode, FieldError, ObjectError
from itemservice.validators.shapes import declared_fields


class ValidationReport(BaseModel):
    """Ordered errors for one target, plus the target itself for redisplay."""

    object_name: str
    target: Any = Field(default=None, exclude=True)
    errors: list[Union[FieldError, ObjectError]] = Field(default_factory=list)

    _resolver: MessageCodesResolver = PrivateAttr(default=message_codes_resolver)

    @classmethod
    def for_target(
        cls,
        target: Any,
        object_name: str,
        resolver: Optional[MessageCodesResolver] = None,
    ) -> "ValidationReport":
        report = cls(object_name=object_name, target=target)
        if resolver is not None:
            report._resolver = resolver
        return report

    # ── Appending ──

    def add_field_error(
        self,
        field: str,
        rejected_value: Any,
        binding_failure: bool,
        codes: Sequence[str],
        arguments: Sequence[Any] = (),
    ) -> FieldError:
        error = FieldError(
            object_name=self.object_name,
            field=field,
            rejected_value=rejected_value,
            binding_failure=binding_failure,
            codes=tuple(codes),
            arguments=tuple(arguments),
        )
        self.errors.append(error)
        return error

    def add_object_error(self, codes: Sequence[str], arguments: Sequence[Any] = ()) -> ObjectError:
        error = ObjectError(
            object_name=self.object_name,
            codes=tuple(codes),
            arguments=tuple(arguments),
        )
        self.errors.append(error)
        return error

    def reject(self, code: Union[ErrorCode, str], arguments: Sequence[Any] = ()) -> ObjectError:
        """Append an object error for ``code``, expanded into its fallback chain."""
        codes = self._resolver.resolve_object_codes(code, self.object_name)
        return self.add_object_error(codes, arguments)

    def reject_value(
        self,
        field: str,
        code: Union[ErrorCode, str],
        arguments: Sequence[Any] = (),
    ) -> FieldError:
        """Append a field error carrying the target's current value for ``field``.

        Raises:
            ConstraintConfigurationError: the target does not declare ``field``.
        """
        fields = declared_fields(type(self.target))
        if field not in fields:
            raise ConstraintConfigurationError(
                f"'{type(self.target).__name__}' has no field '{field}'"
            )

        codes = self._resolver.resolve_field_codes(code, self.object_name, field, fields[field])
        return self.add_field_error(
            field,
            getattr(self.target, field),
            False,
            codes,
            arguments,
        )

    # ── Queries ──

    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def all_errors(self) -> list[Union[FieldError, ObjectError]]:
        return list(self.errors)

    def field_errors(self, field: Optional[str] = None) -> list[FieldError]:
        return [
            e for e in self.errors
            if isinstance(e, FieldError) and (field is None or e.field == field)
        ]

    def object_errors(self) -> list[ObjectError]:
        return [e for e in self.errors if not isinstance(e, FieldError)]

    def field_error(self, field: str) -> Optional[FieldError]:
        """First error recorded for ``field``, if any."""
        return next(iter(self.field_errors(field)), None)

    def has_field_errors(self, field: Optional[str] = None) -> bool:
        return bool(self.field_errors(field))

    def has_binding_failure(self, field: str) -> bool:
        return any(e.binding_failure for e in self.field_errors(field))

    def field_value(self, field: str) -> Any:
        """Value to redisplay for ``field``.

        Once a field has an error the rejected value wins over the target,
        whose attribute may be stale or unset after a failed conversion.
        """
        error = self.field_error(field)
        if error is not None:
            return error.rejected_value
        return getattr(self.target, field, None)
