"""Item validator — profile-scoped constraint checks and error reporting.

Usage:
    from itemservice.validators import Profile, build_default_engine

    report = build_default_engine().validate(item, Profile.SAVE)
    if report.has_errors():
        # Redisplay with report.field_value(field) and each error's codes
"""

from itemservice.validators.catalog import ConstraintCatalog
from itemservice.validators.codes import MessageCodesResolver, message_codes_resolver
from itemservice.validators.engine import ValidationEngine, build_default_engine
from itemservice.validators.exceptions import ConstraintConfigurationError
from itemservice.validators.models import (
    ConstraintKind,
    ConstraintRule,
    ErrorCode,
    FieldError,
    ObjectError,
    Profile,
)
from itemservice.validators.report import ValidationReport

__all__ = [
    "ValidationEngine",
    "build_default_engine",
    "ValidationReport",
    "ConstraintCatalog",
    "ConstraintConfigurationError",
    "ConstraintKind",
    "ConstraintRule",
    "ErrorCode",
    "FieldError",
    "ObjectError",
    "Profile",
    "MessageCodesResolver",
    "message_codes_resolver",
]
