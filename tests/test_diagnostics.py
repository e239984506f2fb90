"""Tests for diagnostic codes, templates, formatting and exceptions."""

from __future__ import annotations

import json

import pytest

from tagtranslate.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    MessageNotFoundError,
    MessageSyntaxError,
    OutputFormat,
    SourceSpan,
    TranslateError,
    UnbalancedTagsError,
)


class TestSourceSpan:
    """SourceSpan validation."""

    def test_valid(self) -> None:
        span = SourceSpan(start=2, end=5)
        assert (span.start, span.end) == (2, 5)

    def test_negative_start(self) -> None:
        with pytest.raises(ValueError, match="must be >= 0"):
            SourceSpan(start=-1, end=0)

    def test_end_before_start(self) -> None:
        with pytest.raises(ValueError, match="must be >= start"):
            SourceSpan(start=3, end=2)


class TestDiagnosticCodes:
    """Codes are unique and grouped by category."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_categories(self) -> None:
        assert 1000 <= DiagnosticCode.MESSAGE_NOT_FOUND.value < 2000
        assert 3000 <= DiagnosticCode.UNBALANCED_TAGS.value < 4000
        assert 4000 <= DiagnosticCode.INVALID_PLURAL_FORMS.value < 5000


class TestErrorTemplate:
    """Template messages."""

    def test_message_not_found(self) -> None:
        diagnostic = ErrorTemplate.message_not_found("greeting")

        assert diagnostic.code is DiagnosticCode.MESSAGE_NOT_FOUND
        assert diagnostic.message == "Was unable to find message for key: 'greeting'"

    def test_value_not_provided(self) -> None:
        assert ErrorTemplate.value_not_provided("a").message == "Value 'a' wasn't provided"

    def test_unbalanced_tags_without_position(self) -> None:
        diagnostic = ErrorTemplate.unbalanced_tags("<b>x")

        assert diagnostic.span is None
        assert diagnostic.source == "<b>x"

    def test_invalid_plural_forms(self) -> None:
        diagnostic = ErrorTemplate.invalid_plural_forms("a | b | c", "tr", 2, 3)

        assert diagnostic.message == "Invalid plural forms: expected 2, got 3"
        assert diagnostic.locale == "tr"

    def test_nesting_too_deep(self) -> None:
        assert "(100)" in ErrorTemplate.nesting_too_deep(100).message


class TestDiagnosticFormatter:
    """Output formats."""

    DIAGNOSTIC = Diagnostic(
        code=DiagnosticCode.UNBALANCED_TAGS,
        message="String has unbalanced tags",
        span=SourceSpan(start=6, end=6),
        hint="Close every opened tag",
        source="Hello </b>",
    )

    def test_rust_format(self) -> None:
        output = DiagnosticFormatter().format(self.DIAGNOSTIC)

        assert output.splitlines() == [
            "error[UNBALANCED_TAGS]: String has unbalanced tags",
            "  --> offset 6",
            "  = source: Hello </b>",
            "  = help: Close every opened tag",
        ]

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(self.DIAGNOSTIC) == "UNBALANCED_TAGS: String has unbalanced tags"

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self.DIAGNOSTIC))

        assert data["code"] == "UNBALANCED_TAGS"
        assert data["code_value"] == 3001
        assert data["start"] == 6
        assert data["source"] == "Hello </b>"

    def test_locale_line(self) -> None:
        output = ErrorTemplate.invalid_plural_forms("x", "ru", 4, 1).format_error()
        assert "  = locale: ru" in output.splitlines()

    def test_source_truncated_and_escaped(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.STRUCTURE_MISMATCH,
            message="mismatch",
            source="line1\nline2" + "x" * 50,
        )
        formatter = DiagnosticFormatter(max_source_length=20)
        source_line = formatter.format(diagnostic).splitlines()[1]

        assert source_line == "  = source: line1\\nline2xxxxxxxx..."

    def test_format_all(self) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format_all(
            [ErrorTemplate.value_not_provided("a"), ErrorTemplate.value_not_provided("b")]
        )
        assert output == (
            "VALUE_NOT_PROVIDED: Value 'a' wasn't provided\n\n"
            "VALUE_NOT_PROVIDED: Value 'b' wasn't provided"
        )


class TestExceptions:
    """Exception hierarchy."""

    def test_plain_message(self) -> None:
        error = TranslateError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.message_not_found("k")
        error = MessageNotFoundError(diagnostic, key="k")

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()
        assert error.key == "k"

    def test_syntax_error_keeps_source(self) -> None:
        error = UnbalancedTagsError("bad", source="<b>")

        assert isinstance(error, MessageSyntaxError)
        assert error.source == "<b>"
