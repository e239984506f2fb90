"""Exceptions raised by tagtranslate.

Each one may carry the Diagnostic that produced it; str(error) is the
diagnostic's multi-line rendering.

Python 3.13+.
"""

from .codes import Diagnostic


class TranslateError(Exception):
    """Root of the library's exception tree.

    Attributes:
        diagnostic: Structured record, or None when raised with a plain string
    """

    def __init__(self, message: str | Diagnostic) -> None:
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            text = message.format_error()
        else:
            self.diagnostic = None
            text = message
        super().__init__(text)


class MessageSyntaxError(TranslateError):
    """Message markup could not be parsed.

    Attributes:
        source: The message that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "") -> None:
        super().__init__(message)
        self.source = source


class UnbalancedTagsError(MessageSyntaxError):
    """Open tag never closed, or close tag without a matching open tag.

    Example:
        Hello <b>world        <- <b> never closed
        Hello world</b>       <- </b> never opened
    """


class TagHasAttributesError(MessageSyntaxError):
    """Tag label contains a space, i.e. HTML attribute syntax.

    Example:
        <a href="#">link</a>  <- attributes belong in the supplied value
    """


class NestingTooDeepError(TranslateError):
    """Nesting of tags exceeds the configured depth limit.

    Raised deterministically instead of letting RecursionError escape.

    Attributes:
        max_depth: The limit that was exceeded
    """

    def __init__(self, message: str | Diagnostic, *, max_depth: int = 0) -> None:
        super().__init__(message)
        self.max_depth = max_depth


class MessageFormatError(TranslateError):
    """Runtime error while substituting values into a message."""


class MissingValueError(MessageFormatError):
    """No usable value for a tag, void tag or placeholder.

    Attributes:
        name: Tag or placeholder name that could not be resolved
    """

    def __init__(self, message: str | Diagnostic, *, name: str) -> None:
        super().__init__(message)
        self.name = name


class PluralFormError(TranslateError):
    """Plural message does not fit the locale's plural forms."""


class InvalidPluralFormsError(PluralFormError):
    """Translated plural message has the wrong number of forms for its locale.

    Attributes:
        locale: Locale of the translated message
        expected: Number of forms the locale requires
        actual: Number of forms found
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale: str = "",
        expected: int = 0,
        actual: int = 0,
    ) -> None:
        super().__init__(message)
        self.locale = locale
        self.expected = expected
        self.actual = actual


class MessageKeyResolutionError(PluralFormError):
    """Selected plural form does not exist in the message.

    Attributes:
        key: Message key being resolved
        index: Form index that was selected
    """

    def __init__(self, message: str | Diagnostic, *, key: str, index: int = 0) -> None:
        super().__init__(message)
        self.key = key
        self.index = index


class TranslateReferenceError(TranslateError):
    """Reference to a message that does not exist."""


class MessageNotFoundError(TranslateReferenceError):
    """Message key missing for both the current and the base locale.

    Attributes:
        key: The message key that was looked up
    """

    def __init__(self, message: str | Diagnostic, *, key: str) -> None:
        super().__init__(message)
        self.key = key
