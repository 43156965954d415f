"""Validation models — profiles, constraint rules, and the errors a report collects.

Rules are immutable and shared across calls. Errors are immutable records;
only the report that owns them grows.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class Profile(str, Enum):
    """Named subsets of the catalog, chosen per validation call."""

    SAVE = "save"
    UPDATE = "update"


class ConstraintKind(str, Enum):
    """What a rule checks."""

    NOT_BLANK = "not_blank"
    NOT_NULL = "not_null"
    RANGE = "range"
    MAX = "max"
    CROSS_FIELD = "cross_field"


class ErrorCode(str, Enum):
    """Base message codes. The resolver expands each into its fallback chain."""

    TYPE_MISMATCH = "typeMismatch"       # Raw input could not be converted
    REQUIRED = "required"                # NOT_BLANK / NOT_NULL
    RANGE = "range"                      # Outside [min, max]
    MAX = "max"                          # Non-positive or above ceiling
    TOTAL_PRICE_MIN = "totalPriceMin"    # price * quantity below the floor


# Field-level kinds map onto a base code; cross-field rules use their own name.
KIND_CODES: dict[ConstraintKind, ErrorCode] = {
    ConstraintKind.NOT_BLANK: ErrorCode.REQUIRED,
    ConstraintKind.NOT_NULL: ErrorCode.REQUIRED,
    ConstraintKind.RANGE: ErrorCode.RANGE,
    ConstraintKind.MAX: ErrorCode.MAX,
}


class ConstraintRule(BaseModel):
    """A single declared constraint.

    An empty ``profiles`` set means the rule is unconditional. An empty
    ``field`` marks an object-level rule, identified by ``name``.
    """

    field: str = ""
    kind: ConstraintKind
    profiles: frozenset[Profile] = Field(default_factory=frozenset)
    params: tuple[Any, ...] = ()
    name: str = ""

    model_config = {"frozen": True}

    @property
    def is_cross_field(self) -> bool:
        return self.kind == ConstraintKind.CROSS_FIELD

    def applies_to(self, profile: Profile) -> bool:
        return not self.profiles or profile in self.profiles


class ObjectError(BaseModel):
    """A failure spanning the whole object. Never produced by binding."""

    object_name: str
    codes: tuple[str, ...] = ()
    arguments: tuple[Any, ...] = ()

    model_config = {"frozen": True}

    @property
    def code(self) -> Optional[str]:
        """The bare code, last and least specific in the chain."""
        return self.codes[-1] if self.codes else None


class FieldError(ObjectError):
    """A failure attributed to one field.

    ``rejected_value`` is the raw submitted value for binding failures, and
    the evaluated field value for rule violations.
    """

    field: str
    rejected_value: Any = None
    binding_failure: bool = False
