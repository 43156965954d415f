"""Message table — resolves an error's code chain to display text."""

from itemservice.messages.source import (
    DEFAULT_MESSAGES_FILE,
    MessageSource,
    NoSuchMessageError,
    load_message_source,
)

__all__ = ["DEFAULT_MESSAGES_FILE", "MessageSource", "NoSuchMessageError", "load_message_source"]
