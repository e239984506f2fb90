"""Error codes and the Diagnostic record carried by every library error.

Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers, one thousand per category.

        1xxx  message lookup
        2xxx  value substitution
        3xxx  markup syntax
        4xxx  plural forms
        5xxx  translation validation
    """

    MESSAGE_NOT_FOUND = 1001

    VALUE_NOT_PROVIDED = 2001
    VALUE_NOT_STRING = 2002

    UNBALANCED_TAGS = 3001
    TAG_HAS_ATTRIBUTES = 3002
    NESTING_TOO_DEEP = 3003

    INVALID_PLURAL_FORMS = 4001
    PLURAL_FORM_NOT_FOUND = 4002

    STRUCTURE_MISMATCH = 5001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open character range [start, end) within a message.

    Offsets count code points, which is what str indexing uses.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            msg = f"span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"span end {self.end} must be >= start {self.start}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """What went wrong, where, and how to fix it.

    Exceptions wrap one of these; validate_translation() returns them
    directly so QA tooling can inspect codes without catching anything.

    Attributes:
        code: Category and identity of the problem
        message: One-line description
        span: Offset into source, when the problem has one
        hint: Suggested fix
        source: The message text involved
        locale: Locale whose plural rule was applied
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source: str | None = None
    locale: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Multi-line rendering used as the str() of library exceptions.

            error[UNBALANCED_TAGS]: String has unbalanced tags
              --> offset 12
              = source: Hello <b>world
              = help: Close every opened tag with a matching </tag>
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
