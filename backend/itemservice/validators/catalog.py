"""Constraint catalog — the declared rules for one target shape.

Built once at startup and read-only afterwards, so one catalog can serve any
number of concurrent validation calls.
"""

from typing import Any, Iterable

from itemservice.validators.models import ConstraintKind, ConstraintRule, Profile


class ConstraintCatalog:
    """An ordered, immutable collection of rules."""

    def __init__(self, rules: Iterable[ConstraintRule]):
        self._rules: tuple[ConstraintRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[ConstraintRule, ...]:
        return self._rules

    def rules_for(self, profile: Profile) -> tuple[ConstraintRule, ...]:
        """Rules that run under ``profile``, in declaration order.

        Untagged rules always run, so an unknown profile still gets them.
        """
        return tuple(rule for rule in self._rules if rule.applies_to(profile))

    def fields(self) -> set[str]:
        """Every field some rule refers to."""
        return {rule.field for rule in self._rules if rule.field}

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"ConstraintCatalog({len(self._rules)} rules)"


# ── Rule builders ──


def not_blank(field: str, *profiles: Profile) -> ConstraintRule:
    return ConstraintRule(field=field, kind=ConstraintKind.NOT_BLANK, profiles=frozenset(profiles))


def not_null(field: str, *profiles: Profile) -> ConstraintRule:
    return ConstraintRule(field=field, kind=ConstraintKind.NOT_NULL, profiles=frozenset(profiles))


def value_range(field: str, min_value: Any, max_value: Any, *profiles: Profile) -> ConstraintRule:
    return ConstraintRule(
        field=field,
        kind=ConstraintKind.RANGE,
        profiles=frozenset(profiles),
        params=(min_value, max_value),
    )


def max_value(field: str, value: Any, *profiles: Profile) -> ConstraintRule:
    return ConstraintRule(
        field=field,
        kind=ConstraintKind.MAX,
        profiles=frozenset(profiles),
        params=(value,),
    )


def cross_field(name: str, *params: Any, profiles: Iterable[Profile] = ()) -> ConstraintRule:
    """Object-level rule, resolved by ``name`` in the cross-field check registry."""
    return ConstraintRule(
        kind=ConstraintKind.CROSS_FIELD,
        name=name,
        profiles=frozenset(profiles),
        params=params,
    )
