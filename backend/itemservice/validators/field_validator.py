"""Field Validator — per-field constraints: not blank, not null, range, max."""

from typing import Any, Callable, Sequence

from itemservice.validators.base import BaseValidator
from itemservice.validators.exceptions import ConstraintConfigurationError
from itemservice.validators.models import KIND_CODES, ConstraintKind, ConstraintRule
from itemservice.validators.report import ValidationReport


def _is_not_blank(value: Any) -> bool:
    return value is not None and bool(str(value).strip())


def _is_not_null(value: Any) -> bool:
    return value is not None


def _is_in_range(value: Any, min_value: Any, max_value: Any) -> bool:
    return value is not None and min_value <= value <= max_value


def _is_positive_up_to(value: Any, ceiling: Any) -> bool:
    # quantity must be at least one as well as under the ceiling
    return value is not None and 0 < value <= ceiling


# Each check receives the field value followed by the rule's params.
FIELD_CHECKS: dict[ConstraintKind, Callable[..., bool]] = {
    ConstraintKind.NOT_BLANK: _is_not_blank,
    ConstraintKind.NOT_NULL: _is_not_null,
    ConstraintKind.RANGE: _is_in_range,
    ConstraintKind.MAX: _is_positive_up_to,
}


class FieldValidator(BaseValidator):
    """Evaluates every field rule and appends one error per failing rule.

    Rules for the same field are independent; a field can collect several
    errors in one pass. Fields whose raw input already failed to bind are
    skipped, since their typed value was never set.
    """

    @property
    def name(self) -> str:
        return "FieldValidator"

    def validate(self, target: Any, rules: Sequence[ConstraintRule], report: ValidationReport) -> None:
        for rule in self._field_rules(rules):
            if report.has_binding_failure(rule.field):
                continue
            self.validate_field(target, rule, report)

    def validate_field(self, target: Any, rule: ConstraintRule, report: ValidationReport) -> None:
        check = FIELD_CHECKS.get(rule.kind)
        if check is None or not rule.field:
            raise ConstraintConfigurationError(
                f"Rule {rule.kind.value!r} on field {rule.field!r} is not a field rule"
            )

        if check(self._value(target, rule.field), *rule.params):
            return

        report.reject_value(rule.field, KIND_CODES[rule.kind], rule.params)
