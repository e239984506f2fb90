"""tagtranslate - translation markup parsing, formatting and validation.

Messages use a small markup: paired tags (<a>link</a>), void tags (<img/>),
placeholders (%name%) and pipe-delimited plural forms
("| %count% hour | %count% hours"). Tags carry no attributes; the caller
supplies a function per tag that builds the rendered element.

Public API:
    parse_message - Parse message source to AST
    serialize_message - Serialize AST to message source
    format_message - Substitute values, producing an ordered chunk list
    MessageFormatter - Configurable formatter (join strategy, default tags)
    is_translation_valid - Check a translation keeps the base message markup
    validate_translation - Non-raising variant returning a result object
    Translator / create_translator - Key-based lookup with plural selection
    introspect_message - Names of placeholders and tags a message needs

Exceptions:
    TranslateError - Base exception class
    MessageSyntaxError - Malformed markup
    MessageFormatError - Missing values during formatting
    PluralFormError - Plural form count or selection errors
    TranslateReferenceError - Unknown message keys

Submodules:
    tagtranslate.syntax.ast - AST node types (Text, Tag, VoidTag, Placeholder)
    tagtranslate.runtime.plural_rules - Plural form resolution
    tagtranslate.diagnostics - Error types, codes and diagnostic formatting
"""

from .diagnostics import (
    MessageFormatError,
    MessageSyntaxError,
    PluralFormError,
    TranslateError,
    TranslateReferenceError,
)
from .introspection import MessageIntrospection, extract_placeholders, introspect_message
from .runtime import (
    MessageFormatter,
    MessageProvider,
    Translator,
    create_translator,
    format_message,
)
from .syntax import parse as parse_message
from .syntax import serialize as serialize_message
from .validation import (
    TranslationValidationResult,
    is_translation_valid,
    validate_translation,
)

# Version information - populated from package metadata
# Single source of truth: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tagtranslate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "MessageFormatError",
    "MessageFormatter",
    "MessageIntrospection",
    "MessageProvider",
    "MessageSyntaxError",
    "PluralFormError",
    "TranslateError",
    "TranslateReferenceError",
    "TranslationValidationResult",
    "Translator",
    "__version__",
    "create_translator",
    "extract_placeholders",
    "format_message",
    "introspect_message",
    "is_translation_valid",
    "parse_message",
    "serialize_message",
    "validate_translation",
]
