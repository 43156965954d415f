"""Item records the validation endpoints accept.

Every field is optional at the type level: absence is a validation outcome,
reported by the engine, not a construction failure.
"""

from typing import Optional

from pydantic import BaseModel


class Item(BaseModel):
    """A catalog item. Saved without an id, updated with one."""

    id: Optional[int] = None
    item_name: Optional[str] = None
    price: Optional[int] = None
    quantity: Optional[int] = None


class ItemUpdateForm(BaseModel):
    """Edit form for an item. Its rules carry no profile and always run."""

    id: Optional[int] = None
    item_name: Optional[str] = None
    price: Optional[int] = None
    quantity: Optional[int] = None

    def to_item(self) -> Item:
        return Item(**self.model_dump())
