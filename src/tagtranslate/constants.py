"""Shared constants for tagtranslate.

This module provides centralized configuration constants used across
syntax, runtime and validation packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing/formatting/validation
- Markup: Control characters of the message syntax
- Plural forms: Delimiter and escape sequence
- Default tags: Tags rendered without caller-supplied values

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Markup
    "TAG_OPEN_BRACE",
    "TAG_CLOSE_BRACE",
    "CLOSING_TAG_MARK",
    "PLACEHOLDER_MARK",
    # Plural forms
    "PLURAL_DELIMITER",
    "PLURAL_DELIMITER_ESCAPE",
    # Default tags
    "DEFAULT_TAGS",
    # Locales
    "DEFAULT_LOCALE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# A single limit is shared by the parser (simultaneously open tags), the
# formatter (tag children recursion), the validator (structure comparison),
# the serializer and introspection. Real UI strings nest two or three tags;
# anything approaching 100 levels is malformed or adversarial input.
#
# The effective value is clamped against sys.getrecursionlimit() by
# DepthGuard, so lowering the interpreter limit never produces RecursionError.

MAX_DEPTH: int = 100

# ============================================================================
# MARKUP
# ============================================================================

TAG_OPEN_BRACE: str = "<"
TAG_CLOSE_BRACE: str = ">"
CLOSING_TAG_MARK: str = "/"

# "%name%" is a placeholder, "%%" is an escaped literal percent sign.
PLACEHOLDER_MARK: str = "%"

# ============================================================================
# PLURAL FORMS
# ============================================================================

PLURAL_DELIMITER: str = "|"

# "\|" keeps a literal pipe inside a single form.
PLURAL_DELIMITER_ESCAPE: str = "\\|"

# ============================================================================
# DEFAULT TAGS
# ============================================================================

# Tags rendered as themselves ("<b>children</b>") when the caller supplies
# no value for them.
DEFAULT_TAGS: tuple[str, ...] = ("p", "b", "strong", "tt", "s", "i")

# ============================================================================
# LOCALES
# ============================================================================

# Plural rule used when a locale is unknown both to the built-in table and
# to Babel's CLDR data.
DEFAULT_LOCALE: str = "en"
