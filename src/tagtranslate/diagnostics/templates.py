"""Constructors for every Diagnostic the library emits.

Wording lives here so tests and docs can rely on one source of truth.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Factory for the library's diagnostics.

    Exceptions are raised with a Diagnostic from one of these methods, never
    with an inline message string.
    """

    @staticmethod
    def message_not_found(key: str) -> Diagnostic:
        """Message key missing for both the current and the base locale.

        Args:
            key: The message key that was looked up

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Was unable to find message for key: '{key}'"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Add the key to the base locale messages",
        )

    @staticmethod
    def value_not_provided(name: str) -> Diagnostic:
        """Tag, void tag or placeholder has no value.

        Args:
            name: Tag or placeholder name

        Returns:
            Diagnostic for VALUE_NOT_PROVIDED
        """
        msg = f"Value '{name}' wasn't provided"
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_PROVIDED,
            message=msg,
            hint=f"Pass '{name}' in the values mapping",
        )

    @staticmethod
    def value_not_string(name: str, type_name: str) -> Diagnostic:
        """Void tag or placeholder value is a function instead of a string.

        Args:
            name: Void tag or placeholder name
            type_name: Type of the value that was supplied

        Returns:
            Diagnostic for VALUE_NOT_STRING
        """
        msg = f"Value '{name}' wasn't provided as a string (got {type_name})"
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_STRING,
            message=msg,
            hint="Only paired tags accept functions; placeholders and void tags need strings",
        )

    @staticmethod
    def unbalanced_tags(source: str, position: int | None = None) -> Diagnostic:
        """Open or close tag without its pair.

        Args:
            source: Message being parsed
            position: Offset of the close tag that failed to match (None at end of input)

        Returns:
            Diagnostic for UNBALANCED_TAGS
        """
        span = SourceSpan(start=position, end=position) if position is not None else None
        return Diagnostic(
            code=DiagnosticCode.UNBALANCED_TAGS,
            message="String has unbalanced tags",
            span=span,
            hint="Close every opened tag with a matching </tag>",
            source=source,
        )

    @staticmethod
    def tag_has_attributes(source: str, tag: str, position: int) -> Diagnostic:
        """Tag label contains a space (attribute syntax).

        Args:
            source: Message being parsed
            tag: Raw tag label found on the stack
            position: Offset of the close tag being matched

        Returns:
            Diagnostic for TAG_HAS_ATTRIBUTES
        """
        msg = f"Tags in string should not have attributes: <{tag}>"
        return Diagnostic(
            code=DiagnosticCode.TAG_HAS_ATTRIBUTES,
            message=msg,
            span=SourceSpan(start=position, end=position),
            hint="Move attributes into the value supplied for the tag",
            source=source,
        )

    @staticmethod
    def nesting_too_deep(max_depth: int) -> Diagnostic:
        """Maximum nesting depth exceeded.

        Args:
            max_depth: The maximum allowed depth

        Returns:
            Diagnostic for NESTING_TOO_DEEP
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_TOO_DEEP,
            message=msg,
            hint="Reduce the number of nested tags",
        )

    @staticmethod
    def invalid_plural_forms(
        source: str,
        locale: str,
        expected: int,
        actual: int,
    ) -> Diagnostic:
        """Translated message has the wrong number of plural forms.

        Args:
            source: Translated message
            locale: Locale of the translated message
            expected: Number of forms the locale requires
            actual: Number of forms found

        Returns:
            Diagnostic for INVALID_PLURAL_FORMS
        """
        msg = f"Invalid plural forms: expected {expected}, got {actual}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLURAL_FORMS,
            message=msg,
            hint="Separate forms with '|'; the first form is used for zero",
            source=source,
            locale=locale,
        )

    @staticmethod
    def plural_form_not_found(key: str, index: int, count: int, locale: str) -> Diagnostic:
        """Selected plural form index is out of range.

        Args:
            key: Message key being resolved
            index: Selected form index
            count: Number of forms in the message
            locale: Locale used for selection

        Returns:
            Diagnostic for PLURAL_FORM_NOT_FOUND
        """
        msg = f"No plural form {index} for key '{key}' (message has {count} forms)"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORM_NOT_FOUND,
            message=msg,
            hint="Provide every plural form the locale requires",
            locale=locale,
        )

    @staticmethod
    def structure_mismatch(base: str, translated: str) -> Diagnostic:
        """Translated message does not preserve the base message markup.

        Args:
            base: Base message
            translated: Translated message

        Returns:
            Diagnostic for STRUCTURE_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.STRUCTURE_MISMATCH,
            message=f"Translation structure differs from base message: {base!r}",
            hint="Keep every tag and placeholder of the base message",
            source=translated,
        )
