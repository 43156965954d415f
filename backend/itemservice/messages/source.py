"""Message source — looks codes up in a sparse table, most specific first.

Tables are flat JSON objects of ``code -> template``. Templates take
positional placeholders (``{0}``, ``{1}``) filled from the error's arguments.
A placeholder with no matching argument, or a named one, is left in the text
as written. Only lookup and placeholder filling happen here; there is no
locale handling.
"""

import json
import string
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import structlog

from itemservice.validators.models import ObjectError

logger = structlog.get_logger()

DEFAULT_MESSAGES_FILE = Path(__file__).parent / "errors.json"

# Cache loaded tables to avoid re-reading from disk
_source_cache: dict[Path, "MessageSource"] = {}


class _Unfilled:
    """Stands in for a missing argument and renders back as its placeholder."""

    def __init__(self, key: Union[int, str]):
        self.key = key

    def __format__(self, format_spec: str) -> str:
        suffix = f":{format_spec}" if format_spec else ""
        return "{" + str(self.key) + suffix + "}"


class _TemplateFormatter(string.Formatter):
    def get_value(self, key, args, kwargs):
        if isinstance(key, int):
            return args[key] if key < len(args) else _Unfilled(key)
        return kwargs.get(key, _Unfilled(key))

    def convert_field(self, value, conversion):
        if isinstance(value, _Unfilled):
            return value
        return super().convert_field(value, conversion)


_formatter = _TemplateFormatter()


def format_template(template: str, arguments: Sequence[Any] = ()) -> str:
    """Fill ``template`` from ``arguments``.

    A template that cannot be filled, such as one with an unbalanced brace,
    is returned unfilled.
    """
    try:
        return _formatter.vformat(template, tuple(arguments), {})
    except (ValueError, LookupError, AttributeError) as e:
        logger.warning("message_format_failed", template=template, error=str(e))
        return template


class NoSuchMessageError(LookupError):
    """None of the codes has a template and no default was given."""

    def __init__(self, codes: Sequence[str]):
        self.codes = tuple(codes)
        super().__init__(f"No message found under codes {list(self.codes)}")


class MessageSource:
    """A read-only ``code -> template`` table."""

    def __init__(self, messages: dict[str, str]):
        self._messages = dict(messages)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "MessageSource":
        return cls(json.loads(Path(path).read_text(encoding="utf-8")))

    def __contains__(self, code: str) -> bool:
        return code in self._messages

    def get_message(
        self,
        codes: Sequence[str],
        arguments: Sequence[Any] = (),
        default: Optional[str] = None,
    ) -> str:
        """Format the first template found along ``codes``.

        Raises:
            NoSuchMessageError: no code matched and ``default`` is None
        """
        for code in codes:
            template = self._messages.get(code)
            if template is not None:
                return format_template(template, arguments)
        if default is not None:
            return format_template(default, arguments)
        raise NoSuchMessageError(codes)

    def resolve(self, error: ObjectError, default: Optional[str] = None) -> str:
        """Message for a field or object error."""
        return self.get_message(error.codes, error.arguments, default)


def load_message_source(path: Union[str, Path, None] = None) -> MessageSource:
    """Load and cache the table at ``path`` (the bundled table by default)."""
    resolved = Path(path or DEFAULT_MESSAGES_FILE).resolve()
    if resolved not in _source_cache:
        _source_cache[resolved] = MessageSource.from_file(resolved)
    return _source_cache[resolved]
