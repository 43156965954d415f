"""Validation Engine — runs the validator chain for a registered target type.

This is the main entry point for item validation. Each target type is
registered with its constraint catalog; a call selects that catalog's rules
for the requested profile and runs every validator over them into one report.

Usage:
    engine = build_default_engine()
    report = engine.validate(item, Profile.SAVE)
    if report.has_errors():
        # Redisplay using report.field_value(...) and the resolved messages
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

import structlog

from itemservice.models.item import Item, ItemUpdateForm
from itemservice.validators.base import BaseValidator
from itemservice.validators.catalog import ConstraintCatalog
from itemservice.validators.codes import MessageCodesResolver, message_codes_resolver
from itemservice.validators.cross_field_validator import (
    DEFAULT_TOTAL_PRICE_MIN,
    CrossFieldValidator,
)
from itemservice.validators.exceptions import ConstraintConfigurationError
from itemservice.validators.field_validator import FieldValidator
from itemservice.validators.item_rules import build_item_catalog, build_item_update_form_catalog
from itemservice.validators.models import ConstraintRule, Profile
from itemservice.validators.report import ValidationReport
from itemservice.validators.shapes import declared_fields, default_object_name

logger = structlog.get_logger()

ReportHook = Callable[[ValidationReport], None]


@dataclass(frozen=True)
class TargetRegistration:
    """A target type, the name its errors are reported under, and its rules."""

    model: type
    object_name: str
    catalog: ConstraintCatalog


class ValidationEngine:
    """Orchestrates the validators and produces one report per call.

    Design principles:
        - Deterministic: same target and profile, same ordered errors
        - Violations are reported, never raised
        - Misconfiguration is raised, never reported
        - Observable: one log event per call, plus an optional report hook
    """

    def __init__(
        self,
        validators: Optional[list[BaseValidator]] = None,
        resolver: Optional[MessageCodesResolver] = None,
        on_report: Optional[ReportHook] = None,
    ):
        """Initialize with the default validator chain or a custom list.

        Args:
            validators: Optional list of validators. If None, uses the defaults.
            resolver: Code resolver handed to every report this engine creates.
            on_report: Called with each finished report, for tracing.
        """
        self.validators = validators or self._default_validators()
        self.resolver = resolver or message_codes_resolver
        self.on_report = on_report
        self._registry: dict[type, TargetRegistration] = {}

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the default validator chain in execution order."""
        return [
            FieldValidator(),        # Per-field rules first
            CrossFieldValidator(),   # Derived values, once fields are checked
        ]

    # ── Registry ──

    def register(
        self,
        model: type,
        catalog: ConstraintCatalog,
        object_name: Optional[str] = None,
    ) -> TargetRegistration:
        """Associate ``model`` with its rules. Re-registering replaces the entry."""
        registration = TargetRegistration(
            model=model,
            object_name=object_name or default_object_name(model),
            catalog=catalog,
        )
        self._registry[model] = registration
        return registration

    def registration_for(self, target: Any) -> TargetRegistration:
        registration = self._registry.get(type(target))
        if registration is None:
            raise ConstraintConfigurationError(
                f"No constraint catalog registered for '{type(target).__name__}'"
            )
        return registration

    # ── Validation ──

    def validate(
        self,
        target: Any,
        profile: Profile,
        report: Optional[ValidationReport] = None,
    ) -> ValidationReport:
        """Run all validators against ``target`` for ``profile``.

        Args:
            target: A registered, already-bound object
            profile: Selects which catalog rules run
            report: Report from a prior binding step to append to; a fresh
                one is created when omitted

        Returns:
            The report holding every violation, in evaluation order

        Raises:
            ConstraintConfigurationError: the target type is unregistered or
                a selected rule does not fit the target's declared shape
        """
        start_time = time.perf_counter()
        profile_name = getattr(profile, "value", profile)

        registration = self.registration_for(target)
        rules = registration.catalog.rules_for(profile)
        self._check_shape(registration, rules)

        if report is None:
            report = ValidationReport.for_target(target, registration.object_name, self.resolver)

        validator_timings: dict[str, float] = {}
        for validator in self.validators:
            v_start = time.perf_counter()
            try:
                validator.validate(target, rules, report)
            except ConstraintConfigurationError as e:
                logger.error(
                    "validation_misconfigured",
                    validator=validator.name,
                    object_name=registration.object_name,
                    profile=profile_name,
                    error=str(e),
                )
                raise
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 3)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            object_name=registration.object_name,
            profile=profile_name,
            rules=len(rules),
            error_count=report.error_count,
            duration_ms=round(total_duration, 3),
            validator_timings=validator_timings,
        )

        if self.on_report is not None:
            self.on_report(report)

        return report

    @staticmethod
    def _check_shape(registration: TargetRegistration, rules: tuple[ConstraintRule, ...]) -> None:
        fields = declared_fields(registration.model)
        unknown = sorted({rule.field for rule in rules if rule.field} - fields.keys())
        if unknown:
            logger.error(
                "validation_misconfigured",
                object_name=registration.object_name,
                unknown_fields=unknown,
            )
            raise ConstraintConfigurationError(
                f"Rules reference fields {unknown} not declared on '{registration.model.__name__}'"
            )

    def add_validator(self, validator: BaseValidator) -> None:
        """Add a custom validator to the end of the chain."""
        self.validators.append(validator)

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]


def build_default_engine(
    total_price_min: int = DEFAULT_TOTAL_PRICE_MIN,
    on_report: Optional[ReportHook] = None,
) -> ValidationEngine:
    """Engine with ``Item`` and ``ItemUpdateForm`` registered."""
    engine = ValidationEngine(on_report=on_report)
    engine.register(Item, build_item_catalog(total_price_min))
    engine.register(ItemUpdateForm, build_item_update_form_catalog(total_price_min))
    return engine
