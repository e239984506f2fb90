"""Translator - key-based message lookup on top of the formatter.

Resolves a message key through a caller-supplied provider (current locale
first, base locale as fallback), selects the plural form when asked to,
formats the message and hands the chunks to a message constructor that
decides the final output type (a joined string by default, UI nodes in
framework adapters).

Python 3.13+.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Protocol

from tagtranslate.diagnostics import ErrorTemplate, MessageNotFoundError
from tagtranslate.runtime.formatter import MessageFormatter, join_chunks
from tagtranslate.runtime.plural_rules import get_form, unescape_delimiter

__all__ = [
    "MessageConstructor",
    "MessageProvider",
    "Translator",
    "create_translator",
]

logger = logging.getLogger(__name__)

type MessageConstructor[T] = Callable[[list[object]], T]


class MessageProvider(Protocol):
    """Source of raw messages for the current and the base locale."""

    def get_message(self, key: str) -> str | None:
        """Return the message for key in the current locale."""
        ...

    def get_ui_language(self) -> str:
        """Return the current locale code."""
        ...

    def get_base_message(self, key: str) -> str | None:
        """Return the message for key in the base locale."""
        ...

    def get_base_ui_language(self) -> str:
        """Return the base locale code."""
        ...


class Translator[T = str]:
    """Formats messages by key.

    Thread Safety:
        Holds only configuration. Every call builds its own value table, so
        a translator can be shared as long as the provider is thread-safe.

    Example:
        >>> translator = Translator(provider)
        >>> translator.get_message("simple")
        '<b>bold</b> in the text'
        >>> translator.get_plural("hours", 2)
        '2 hours'
    """

    __slots__ = ("_formatter", "_message_constructor", "_provider", "_values")

    def __init__(
        self,
        provider: MessageProvider,
        message_constructor: MessageConstructor[T] | None = None,
        values: Mapping[str, object] | None = None,
        *,
        formatter: MessageFormatter[object] | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            provider: Message lookup for current and base locale
            message_constructor: Builds the output from formatted chunks
                (default: join into one string)
            values: Default values merged under per-call params
            formatter: Formatter to use (default: MessageFormatter())
        """
        self._provider = provider
        self._message_constructor: MessageConstructor[T] = (
            message_constructor or join_chunks  # type: ignore[assignment]
        )
        self._values: dict[str, object] = dict(values or {})
        self._formatter = formatter or MessageFormatter[object]()

    def get_message(self, key: str, params: Mapping[str, object] | None = None) -> T:
        """Format the message for key.

        Escaped "\\|" is rendered as "|", as in plural forms.

        Raises:
            MessageNotFoundError: Key missing for current and base locale
            MissingValueError: A tag or placeholder has no value
        """
        message, _ = self._lookup(key)
        values = {**self._values, **(params or {})}
        formatted = self._formatter.format(unescape_delimiter(message), values)
        return self._message_constructor(formatted)

    def get_plural(
        self,
        key: str,
        number: int,
        params: Mapping[str, object] | None = None,
    ) -> T:
        """Format the plural form of the message for key that applies to number.

        The "count" value defaults to number unless params supplies it.

        Raises:
            MessageNotFoundError: Key missing for current and base locale
            MessageKeyResolutionError: The selected plural form does not exist
            MissingValueError: A tag or placeholder has no value
        """
        message, locale = self._lookup(key)
        form = get_form(message, number, locale, key)
        values = {"count": number, **self._values, **(params or {})}
        formatted = self._formatter.format(form, values)
        return self._message_constructor(formatted)

    def _lookup(self, key: str) -> tuple[str, str]:
        """Return (message, locale it belongs to)."""
        message = self._provider.get_message(key)
        if message:
            return message, self._provider.get_ui_language()

        message = self._provider.get_base_message(key)
        if message:
            logger.debug("Message '%s' missing in current locale, using base locale", key)
            return message, self._provider.get_base_ui_language()

        raise MessageNotFoundError(ErrorTemplate.message_not_found(key), key=key)


def create_translator[T = str](
    provider: MessageProvider,
    message_constructor: MessageConstructor[T] | None = None,
    values: Mapping[str, object] | None = None,
) -> Translator[T]:
    """Create a translator, by default producing plain strings."""
    return Translator(provider, message_constructor, values)
