"""Runtime: plural form resolution, formatting and key-based translation.

Python 3.13+. External dependency: Babel (CLDR plural data fallback).
"""

from .formatter import (
    MessageFormatter,
    create_default_values,
    create_string_element,
    format_message,
)
from .plural_rules import (
    PluralRule,
    category_count,
    expected_form_count,
    get_form,
    get_forms,
    get_plural_rule,
    has_plural_form,
    is_plural_form_valid,
    select_form_index,
    unescape_delimiter,
)
from .translator import MessageProvider, Translator, create_translator

__all__ = [
    "MessageFormatter",
    "MessageProvider",
    "PluralRule",
    "Translator",
    "category_count",
    "create_default_values",
    "create_string_element",
    "create_translator",
    "expected_form_count",
    "format_message",
    "get_form",
    "get_forms",
    "get_plural_rule",
    "has_plural_form",
    "is_plural_form_valid",
    "select_form_index",
    "unescape_delimiter",
]
