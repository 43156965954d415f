"""Cross-Field Validator — rules over derived values spanning several fields."""

from typing import Any, Callable, Optional, Sequence

from itemservice.validators.base import BaseValidator
from itemservice.validators.exceptions import ConstraintConfigurationError
from itemservice.validators.models import ConstraintRule, ErrorCode
from itemservice.validators.report import ValidationReport
from itemservice.validators.shapes import declared_fields

DEFAULT_TOTAL_PRICE_MIN = 10_000

CrossFieldCheck = Callable[[Any, ConstraintRule, ValidationReport], None]


def total_price_min(target: Any, rule: ConstraintRule, report: ValidationReport) -> None:
    """price * quantity must reach the floor given as the rule's first param.

    Skipped when either operand is missing: that absence is already reported
    as a field error and must not also count as a cross-field failure.
    """
    missing = {"price", "quantity"} - declared_fields(type(target)).keys()
    if missing:
        raise ConstraintConfigurationError(
            f"'{rule.name}' needs fields {sorted(missing)} on '{type(target).__name__}'"
        )

    price, quantity = target.price, target.quantity
    if price is None or quantity is None:
        return

    floor = rule.params[0] if rule.params else DEFAULT_TOTAL_PRICE_MIN
    total = price * quantity
    if total < floor:
        report.reject(ErrorCode.TOTAL_PRICE_MIN, (f"{floor:,}", total))


CROSS_FIELD_CHECKS: dict[str, CrossFieldCheck] = {
    ErrorCode.TOTAL_PRICE_MIN.value: total_price_min,
}


class CrossFieldValidator(BaseValidator):
    """Runs the object-level rules, looked up by name in a check registry."""

    def __init__(self, checks: Optional[dict[str, CrossFieldCheck]] = None):
        self.checks = dict(CROSS_FIELD_CHECKS if checks is None else checks)

    @property
    def name(self) -> str:
        return "CrossFieldValidator"

    def validate(self, target: Any, rules: Sequence[ConstraintRule], report: ValidationReport) -> None:
        self.validate_cross_field(target, self._cross_field_rules(rules), report)

    def validate_cross_field(
        self, target: Any, rules: Sequence[ConstraintRule], report: ValidationReport
    ) -> None:
        for rule in rules:
            check = self.checks.get(rule.name)
            if check is None:
                raise ConstraintConfigurationError(f"No cross-field check registered as '{rule.name}'")
            check(target, rule, report)

    def register(self, name: str, check: CrossFieldCheck) -> None:
        """Add or replace a named check."""
        self.checks[name] = check
