"""Rendering of Diagnostic records for terminals, logs and tools.

Exceptions render through the default rust style; callers that collect
diagnostics from validate_translation() pick a style per use.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Rendering styles understood by DiagnosticFormatter."""

    RUST = "rust"
    """Header line followed by indented context lines."""

    SIMPLE = "simple"
    """CODE: message on one line."""

    JSON = "json"
    """One JSON object per diagnostic."""


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns diagnostics into text.

    Message sources quoted in the output have line breaks escaped and are
    cut at max_source_length characters.

    Example:
        >>> plain = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> plain.format(ErrorTemplate.value_not_provided("name"))
        "VALUE_NOT_PROVIDED: Value 'name' wasn't provided"
    """

    output_format: OutputFormat = OutputFormat.RUST
    max_source_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {diagnostic.message}"
            case OutputFormat.JSON:
                return json.dumps(self._as_mapping(diagnostic), ensure_ascii=False)
            case _:
                return self._as_block(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, one blank line between them."""
        return "\n\n".join(map(self.format, diagnostics))

    def _as_block(self, diagnostic: Diagnostic) -> str:
        lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.span:
            lines.append(f"  --> offset {diagnostic.span.start}")
        if diagnostic.locale:
            lines.append(f"  = locale: {diagnostic.locale}")
        if diagnostic.source is not None:
            lines.append(f"  = source: {self._clip(diagnostic.source)}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)

    def _as_mapping(self, diagnostic: Diagnostic) -> dict[str, str | int]:
        record: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        if span := diagnostic.span:
            record |= {"start": span.start, "end": span.end}
        if diagnostic.locale:
            record["locale"] = diagnostic.locale
        if diagnostic.source is not None:
            record["source"] = self._clip(diagnostic.source)
        if diagnostic.hint:
            record["hint"] = diagnostic.hint
        return record

    def _clip(self, source: str) -> str:
        escaped = source.replace("\r", "\\r").replace("\n", "\\n")
        if len(escaped) <= self.max_source_length:
            return escaped
        return f"{escaped[: self.max_source_length]}..."
