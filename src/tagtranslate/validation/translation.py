"""Translation structure validation.

Checks that a translated message keeps the markup shape of its base
message: the same tags, void tags and placeholders, nested the same way.
Literal text and the order of siblings may differ; same-named siblings
pair up in source order.

Architecture:
    - is_translation_valid(): Main entry point, raises on malformed input
    - _are_structures_same(): Order-independent comparison of two node sequences
    - validate_translation(): Non-raising wrapper returning a result object

Plural messages are compared form by form: the zero forms against each
other, and every other translated form against base form 1.

Python 3.13+.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from tagtranslate.constants import MAX_DEPTH
from tagtranslate.core.depth_guard import DepthGuard
from tagtranslate.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    InvalidPluralFormsError,
    TranslateError,
)
from tagtranslate.runtime.plural_rules import (
    expected_form_count,
    get_forms,
    has_plural_form,
)
from tagtranslate.syntax import MessageParser, Node, Placeholder, Tag, Text, VoidTag

__all__ = [
    "TranslationValidationResult",
    "is_translation_valid",
    "validate_translation",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TranslationValidationResult:
    """Outcome of validating one translation.

    Immutable result object, safe to collect across threads.

    Attributes:
        errors: Diagnostics explaining why the translation is invalid

    Example:
        >>> result = validate_translation("Hi <b>%name%</b>", "Salut %name%", "fr")
        >>> result.is_valid
        False
        >>> result.errors[0].code.name
        'STRUCTURE_MISMATCH'
    """

    errors: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return not self.errors

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @classmethod
    def valid(cls) -> "TranslationValidationResult":
        """Create a passing result."""
        return cls()

    @classmethod
    def invalid(cls, *errors: Diagnostic) -> "TranslationValidationResult":
        """Create a failing result."""
        return cls(errors=errors)


def _signature(node: Node) -> tuple[str, str] | None:
    """Return (kind, name) for markup nodes, None for text."""
    match node:
        case Text():
            return None
        case Tag(name=name) | VoidTag(name=name) | Placeholder(name=name):
            return (node.kind, name)


def _are_structures_same(
    base_nodes: Sequence[Node],
    target_nodes: Sequence[Node],
    guard: DepthGuard,
) -> bool:
    """Compare two node sequences ignoring text and sibling order.

    Each base node takes the first unmatched target node of the same kind
    and name; the pair must then have the same structure recursively.
    Candidates are not retried, so same-named siblings with different
    children must keep their relative order.
    """
    base = [node for node in base_nodes if _signature(node) is not None]
    unmatched = [node for node in target_nodes if _signature(node) is not None]

    if len(base) != len(unmatched):
        return False

    for base_node in base:
        signature = _signature(base_node)
        match_idx = next(
            (
                idx
                for idx, candidate in enumerate(unmatched)
                if _signature(candidate) == signature
            ),
            None,
        )
        if match_idx is None:
            return False
        if not _are_children_same(base_node, unmatched.pop(match_idx), guard):
            return False

    return True


def _are_children_same(base_node: Node, target_node: Node, guard: DepthGuard) -> bool:
    if isinstance(base_node, Tag) and isinstance(target_node, Tag):
        with guard:
            return _are_structures_same(base_node.children, target_node.children, guard)
    return True


def is_translation_valid(
    base_message: str,
    translated_message: str,
    locale: str,
    *,
    parser: MessageParser | None = None,
) -> bool:
    """Validate a translation against its base message by AST structure.

    Args:
        base_message: Message in the base locale
        translated_message: Translation of base_message
        locale: Locale of translated_message
        parser: Parser to use (default: MessageParser())

    Returns:
        - for messages without plural forms: True if the AST structures match;
        - for plural messages: True if every translated form matches its base form.

    Raises:
        InvalidPluralFormsError: Translation has the wrong number of plural forms
        MessageSyntaxError: Either message has malformed markup
        NestingTooDeepError: Tags nest deeper than the parser allows

    Examples:
        >>> is_translation_valid("<b>b node</b> <a>a node</a>", "<a>a нода</a> <b>b нода</b>", "ru")
        True
        >>> is_translation_valid("test string <a>has node</a>", "строка <b>с нодой</b>", "ru")
        False
    """
    if parser is None:
        parser = MessageParser()

    if not has_plural_form(base_message):
        return _is_form_valid(base_message, translated_message, parser)

    translated_forms = get_forms(translated_message)
    expected = expected_form_count(locale)
    if len(translated_forms) != expected:
        raise InvalidPluralFormsError(
            ErrorTemplate.invalid_plural_forms(
                translated_message, locale, expected, len(translated_forms)
            ),
            locale=locale,
            expected=expected,
            actual=len(translated_forms),
        )

    base_forms = get_forms(base_message)

    if not _is_form_valid(base_forms[0], translated_forms[0], parser):
        return False

    # Base form 1 is the template for every non-zero translated form
    return all(
        _is_form_valid(base_forms[1], form, parser) for form in translated_forms[1:]
    )


def _is_form_valid(base_form: str, translated_form: str, parser: MessageParser) -> bool:
    base_ast = parser.parse(base_form)
    translated_ast = parser.parse(translated_form)
    same = _are_structures_same(
        base_ast,
        translated_ast,
        DepthGuard(max_depth=parser.max_nesting_depth or MAX_DEPTH),
    )
    if not same:
        logger.debug("Structure mismatch: %r -> %r", base_form, translated_form)
    return same


def validate_translation(
    base_message: str,
    translated_message: str,
    locale: str,
) -> TranslationValidationResult:
    """Validate a translation without raising for malformed messages.

    Parse errors and plural form errors are reported as diagnostics in the
    result, the same way a structure mismatch is.

    Thread Safety:
        Thread-safe. Creates an isolated parser per call.
    """
    try:
        if is_translation_valid(base_message, translated_message, locale):
            return TranslationValidationResult.valid()
        return TranslationValidationResult.invalid(
            ErrorTemplate.structure_mismatch(base_message, translated_message)
        )
    except TranslateError as e:
        logger.debug("Translation rejected: %s", e)
        if e.diagnostic is None:
            raise
        return TranslationValidationResult.invalid(e.diagnostic)
