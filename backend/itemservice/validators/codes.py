"""Message code resolution.

Expands one short code into a most-specific-first chain so a message table
can stay sparse while still allowing per-object, per-field and per-type
overrides. For ``required`` on ``item.item_name`` (a ``str``):

    required.item.item_name
    required.item_name
    required.str
    required
"""

from enum import Enum
from typing import Union

CODE_SEPARATOR = "."


class MessageCodesResolver:
    """Builds fallback chains for object and field errors."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def resolve_object_codes(self, code: str, object_name: str) -> list[str]:
        code = code_text(code)
        return [
            self._with_prefix(code + CODE_SEPARATOR + object_name),
            self._with_prefix(code),
        ]

    def resolve_field_codes(
        self,
        code: str,
        object_name: str,
        field: str,
        field_type: Union[type, str],
    ) -> list[str]:
        """Return the four-entry chain: object+field, field, type, bare code."""
        code = code_text(code)
        return [
            self._with_prefix(CODE_SEPARATOR.join((code, object_name, field))),
            self._with_prefix(code + CODE_SEPARATOR + field),
            self._with_prefix(code + CODE_SEPARATOR + type_display_name(field_type)),
            self._with_prefix(code),
        ]

    def _with_prefix(self, code: str) -> str:
        return self.prefix + code


def code_text(code: Union[str, Enum]) -> str:
    return code.value if isinstance(code, Enum) else code


def type_display_name(field_type: Union[type, str]) -> str:
    if isinstance(field_type, str):
        return field_type
    return getattr(field_type, "__name__", str(field_type))


# Shared default resolver, no prefix
message_codes_resolver = MessageCodesResolver()
