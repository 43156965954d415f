from dataclasses import dataclass
from typing import Optional

import pytest

from itemservice.models.item import Item, ItemUpdateForm
from itemservice.validators import ConstraintConfigurationError
from itemservice.validators.shapes import declared_fields, default_object_name


@dataclass
class Order:
    total: Optional[int] = None
    note: str | None = None


def test_pydantic_fields_are_unwrapped_from_optional() -> None:
    assert declared_fields(Item) == {"id": int, "item_name": str, "price": int, "quantity": int}


def test_dataclass_fields_are_supported() -> None:
    assert declared_fields(Order) == {"total": int, "note": str}


def test_other_types_are_a_configuration_error() -> None:
    with pytest.raises(ConstraintConfigurationError):
        declared_fields(dict)


def test_default_object_name_lowercases_first_letter() -> None:
    assert default_object_name(Item) == "item"
    assert default_object_name(ItemUpdateForm) == "itemUpdateForm"
