"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit that reads the
target and writes violations into the report it is handed. New validators
are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from itemservice.validators.models import ConstraintRule
from itemservice.validators.report import ValidationReport


class BaseValidator(ABC):
    """Abstract base for all constraint validators.

    Contract:
        - validate() is deterministic: same target and rules, same errors
        - validate() never raises for a rule violation, it appends to the report
        - validate() never mutates the target
        - No I/O, no shared mutable state between calls
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, target: Any, rules: Sequence[ConstraintRule], report: ValidationReport) -> None:
        """Run this validator's share of ``rules`` against ``target``.

        Args:
            target: The populated object under validation
            rules: Rules selected for the current profile, in declaration order
            report: Report for this call; violations are appended to it
        """
        ...

    # ── Helper Methods ──

    def _field_rules(self, rules: Sequence[ConstraintRule]) -> list[ConstraintRule]:
        return [rule for rule in rules if not rule.is_cross_field]

    def _cross_field_rules(self, rules: Sequence[ConstraintRule]) -> list[ConstraintRule]:
        return [rule for rule in rules if rule.is_cross_field]

    def _value(self, target: Any, field: str) -> Any:
        return getattr(target, field, None)
