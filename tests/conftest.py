import pytest

from itemservice.models.item import Item
from itemservice.validators import ValidationEngine, build_default_engine


@pytest.fixture
def engine() -> ValidationEngine:
    return build_default_engine()


@pytest.fixture
def valid_item() -> Item:
    return Item(item_name="Desk Lamp", price=10_000, quantity=10)
