"""Rule catalogs for items — the encoded business limits.

Limits:
    price       1,000 .. 1,000,000 (inclusive)
    quantity    1 .. 9,999 when saving; only required when updating
    total       price * quantity >= 10,000 unless configured otherwise
"""

from itemservice.validators.catalog import (
    ConstraintCatalog,
    cross_field,
    max_value,
    not_blank,
    not_null,
    value_range,
)
from itemservice.validators.cross_field_validator import DEFAULT_TOTAL_PRICE_MIN
from itemservice.validators.models import ErrorCode, Profile

PRICE_MIN = 1_000
PRICE_MAX = 1_000_000
QUANTITY_MAX = 9_999

SAVE = Profile.SAVE
UPDATE = Profile.UPDATE


def build_item_catalog(total_price_min: int = DEFAULT_TOTAL_PRICE_MIN) -> ConstraintCatalog:
    """Rules for ``Item``, scoped by profile."""
    return ConstraintCatalog([
        not_null("id", UPDATE),
        not_blank("item_name", SAVE, UPDATE),
        not_null("price", SAVE, UPDATE),
        value_range("price", PRICE_MIN, PRICE_MAX, SAVE, UPDATE),
        not_null("quantity", SAVE, UPDATE),
        max_value("quantity", QUANTITY_MAX, SAVE),
        cross_field(ErrorCode.TOTAL_PRICE_MIN.value, total_price_min),
    ])


def build_item_update_form_catalog(total_price_min: int = DEFAULT_TOTAL_PRICE_MIN) -> ConstraintCatalog:
    """Rules for ``ItemUpdateForm``; the form itself is the scope, so no tags."""
    return ConstraintCatalog([
        not_null("id"),
        not_blank("item_name"),
        not_null("price"),
        value_range("price", PRICE_MIN, PRICE_MAX),
        not_null("quantity"),
        cross_field(ErrorCode.TOTAL_PRICE_MIN.value, total_price_min),
    ])
