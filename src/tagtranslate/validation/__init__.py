"""Translation validation.

Compares a translated message against its base message: same tags, void
tags and placeholders with the same nesting, plural forms matching the
translation locale.

Python 3.13+.
"""

from .translation import (
    TranslationValidationResult,
    is_translation_valid,
    validate_translation,
)

__all__ = [
    "TranslationValidationResult",
    "is_translation_valid",
    "validate_translation",
]
