"""i18n system - localized text messages.

Provides MessageSource, the text-only façade over the resource resolver.

Main components:
- message_source: MessageSource, NoSuchMessageError, create_message_source
"""

from infrastructure.i18n.message_source import (
    MessageSource,
    NoSuchMessageError,
    create_message_source,
)

__all__ = [
    "MessageSource",
    "NoSuchMessageError",
    "create_message_source",
]
