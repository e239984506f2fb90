"""Diagnostic system for tagtranslate errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    InvalidPluralFormsError,
    MessageFormatError,
    MessageKeyResolutionError,
    MessageNotFoundError,
    MessageSyntaxError,
    MissingValueError,
    NestingTooDeepError,
    PluralFormError,
    TagHasAttributesError,
    TranslateError,
    TranslateReferenceError,
    UnbalancedTagsError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidPluralFormsError",
    "MessageFormatError",
    "MessageKeyResolutionError",
    "MessageNotFoundError",
    "MessageSyntaxError",
    "MissingValueError",
    "NestingTooDeepError",
    "OutputFormat",
    "PluralFormError",
    "SourceSpan",
    "TagHasAttributesError",
    "TranslateError",
    "TranslateReferenceError",
    "UnbalancedTagsError",
]
