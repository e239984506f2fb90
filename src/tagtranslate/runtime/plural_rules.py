"""Plural form resolution for pipe-delimited messages.

A plural message lists its forms separated by "|":

    "Renews today | Renews in %days% day | Renews in %days% days"

Form 0 is the zero form (used for quantity 0). Forms 1..k follow the
grammatical plural categories of the locale in rule order, so a locale with
k categories expects k + 1 forms.

Categories come from a fixed per-locale table (gettext-style rules grouped
by language family). Locales missing from the table fall back to Babel's
CLDR plural rules; codes unknown to Babel fall back to the English rule.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import functools
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from babel.core import UnknownLocaleError

from tagtranslate.constants import (
    DEFAULT_LOCALE,
    PLURAL_DELIMITER,
    PLURAL_DELIMITER_ESCAPE,
)
from tagtranslate.diagnostics import ErrorTemplate, MessageKeyResolutionError
from tagtranslate.locale_utils import get_babel_locale, locale_lookup_keys

__all__ = [
    "PluralRule",
    "category_count",
    "expected_form_count",
    "get_form",
    "get_forms",
    "get_plural_rule",
    "has_plural_form",
    "is_plural_form_valid",
    "select_form_index",
    "unescape_delimiter",
]

logger = logging.getLogger(__name__)

# "|" not preceded by a backslash
_DELIMITER_RE = re.compile(r"(?<!\\)" + re.escape(PLURAL_DELIMITER))

_CLDR_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")


@dataclass(frozen=True, slots=True)
class PluralRule:
    """Plural category rule of one locale.

    Attributes:
        categories: Number of grammatical plural categories
        select: Maps a non-negative quantity to a 0-based category index
        source: Where the rule came from ("table", "cldr" or "fallback")
    """

    categories: int
    select: Callable[[int], int]
    source: str = "table"

    @property
    def form_count(self) -> int:
        """Forms a message needs: the zero form plus one per category."""
        return self.categories + 1


# ============================================================================
# CATEGORY RULES
# ============================================================================


def _no_plural(n: int) -> int:
    return 0


def _one_other(n: int) -> int:
    return 0 if n == 1 else 1


def _zero_one_other(n: int) -> int:
    # French family: 0 and 1 share the singular
    return 0 if n < 2 else 1


def _east_slavic(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _irish(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2


def _lithuanian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _slovenian(n: int) -> int:
    if n % 100 == 1:
        return 0
    if n % 100 == 2:
        return 1
    if n % 100 in (3, 4):
        return 2
    return 3


def _macedonian(n: int) -> int:
    return 0 if n % 10 == 1 else 1


def _maltese(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 < n % 100 < 11:
        return 1
    if 10 < n % 100 < 20:
        return 2
    return 3


def _latvian(n: int) -> int:
    if n == 0:
        return 0
    if n % 10 == 1 and n % 100 != 11:
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 12 or n % 100 > 14):
        return 1
    return 2


def _welsh(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n in (8, 11):
        return 2
    return 3


def _romanian(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 0 < n % 100 < 20:
        return 1
    return 2


def _arabic(n: int) -> int:
    if n <= 2:
        return n
    if 3 <= n % 100 <= 10:
        return 3
    if 11 <= n % 100 <= 99:
        return 4
    return 5


# ============================================================================
# LOCALE TABLE
# ============================================================================

_RULE_GROUPS: tuple[tuple[frozenset[str], PluralRule], ...] = (
    (
        frozenset({
            "az", "bo", "dz", "id", "ja", "jv", "ka", "km", "kn", "ko", "ms",
            "th", "tr", "vi", "zh", "zh_cn", "zh_tw", "zh_hk",
        }),
        PluralRule(1, _no_plural),
    ),
    (
        frozenset({
            "af", "bn", "bg", "ca", "da", "de", "el", "en", "eo", "es", "et",
            "eu", "fa", "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he", "hu",
            "is", "it", "ku", "lb", "ml", "mn", "mr", "nah", "nb", "ne", "nl",
            "nn", "no", "oc", "om", "or", "pa", "pap", "ps", "pt", "pt_pt",
            "so", "sq", "sv", "sw", "ta", "te", "tk", "ur", "zu",
        }),
        PluralRule(2, _one_other),
    ),
    (
        frozenset({
            "am", "bh", "fil", "fr", "gun", "hi", "hy", "ln", "mg", "nso",
            "pt_br", "ti", "wa",
        }),
        PluralRule(2, _zero_one_other),
    ),
    (
        frozenset({"be", "bs", "hr", "ru", "sh", "sr", "sr_latn", "uk"}),
        PluralRule(3, _east_slavic),
    ),
    (frozenset({"cs", "sk"}), PluralRule(3, _czech)),
    (frozenset({"ga"}), PluralRule(3, _irish)),
    (frozenset({"lt"}), PluralRule(3, _lithuanian)),
    (frozenset({"sl"}), PluralRule(4, _slovenian)),
    (frozenset({"mk"}), PluralRule(2, _macedonian)),
    (frozenset({"mt"}), PluralRule(4, _maltese)),
    (frozenset({"lv"}), PluralRule(3, _latvian)),
    (frozenset({"pl"}), PluralRule(3, _polish)),
    (frozenset({"cy"}), PluralRule(4, _welsh)),
    (frozenset({"ro"}), PluralRule(3, _romanian)),
    (frozenset({"ar"}), PluralRule(6, _arabic)),
)

_LOCALE_RULES: dict[str, PluralRule] = {
    code: rule for codes, rule in _RULE_GROUPS for code in codes
}


def _cldr_rule(locale: str) -> PluralRule | None:
    """Build a rule from Babel's CLDR data, or None if Babel can't parse locale."""
    try:
        babel_locale = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return None

    plural_form = babel_locale.plural_form
    # "other" is implicit in CLDR rules and always present
    categories = tuple(
        tag for tag in _CLDR_CATEGORIES if tag in plural_form.tags or tag == "other"
    )

    def select(n: int) -> int:
        return categories.index(plural_form(n))

    return PluralRule(len(categories), select, source="cldr")


@functools.lru_cache(maxsize=256)
def get_plural_rule(locale: str) -> PluralRule:
    """Resolve the plural rule for a locale code.

    Lookup order: region-specific table entry (pt_BR), language table entry
    (pt), Babel CLDR data, English rule.

    Args:
        locale: Locale code (e.g., "ru", "pt-BR", "zh_CN")

    Returns:
        PluralRule for the locale

    Examples:
        >>> get_plural_rule("ru").form_count
        4
        >>> get_plural_rule("ja").form_count
        2
    """
    for key in locale_lookup_keys(locale):
        rule = _LOCALE_RULES.get(key)
        if rule is not None:
            return rule

    rule = _cldr_rule(locale)
    if rule is not None:
        logger.debug("Locale '%s' not in plural table, using CLDR rule", locale)
        return rule

    logger.warning(
        "Unknown locale '%s' for plural forms. Falling back to '%s' rule",
        locale,
        DEFAULT_LOCALE,
    )
    fallback = _LOCALE_RULES[DEFAULT_LOCALE]
    return PluralRule(fallback.categories, fallback.select, source="fallback")


# ============================================================================
# PUBLIC API
# ============================================================================


def has_plural_form(message: str) -> bool:
    """Check if message contains at least one unescaped "|"."""
    return _DELIMITER_RE.search(message) is not None


def unescape_delimiter(text: str) -> str:
    """Turn escaped "\\|" back into a literal "|"."""
    return text.replace(PLURAL_DELIMITER_ESCAPE, PLURAL_DELIMITER)


def get_forms(message: str) -> tuple[str, ...]:
    """Split message into trimmed plural forms.

    Example:
        >>> get_forms("| %count% hour | %count% hours")
        ('', '%count% hour', '%count% hours')
    """
    return tuple(unescape_delimiter(form.strip()) for form in _DELIMITER_RE.split(message))


def category_count(locale: str) -> int:
    """Number of grammatical plural categories of the locale."""
    return get_plural_rule(locale).categories


def expected_form_count(locale: str) -> int:
    """Number of forms a plural message in this locale must have.

    The zero form plus one form per plural category.

    Examples:
        >>> expected_form_count("ja")
        2
        >>> expected_form_count("en")
        3
        >>> expected_form_count("ru")
        4
    """
    return get_plural_rule(locale).form_count


def select_form_index(number: int, locale: str) -> int:
    """Select the 0-based form index for a quantity.

    Quantity 0 always selects the zero form; other quantities select
    1 + their category index, clamped to the last form.

    Examples:
        >>> select_form_index(0, "en"), select_form_index(1, "en"), select_form_index(5, "en")
        (0, 1, 2)
        >>> select_form_index(22, "ru")
        2
    """
    n = abs(int(number))
    if n == 0:
        return 0
    rule = get_plural_rule(locale)
    return min(1 + rule.select(n), rule.form_count - 1)


def is_plural_form_valid(message: str, locale: str) -> bool:
    """Check if message has exactly the number of forms the locale expects."""
    return len(get_forms(message)) == expected_form_count(locale)


def get_form(message: str, number: int, locale: str, key: str) -> str:
    """Return the plural form of message that applies to number.

    Args:
        message: Pipe-delimited plural message
        number: Quantity
        locale: Locale of message
        key: Message key (for error reporting)

    Returns:
        The selected, trimmed form

    Raises:
        MessageKeyResolutionError: If the message has no form at the selected index
    """
    forms = get_forms(message)
    index = select_form_index(number, locale)
    if index >= len(forms):
        raise MessageKeyResolutionError(
            ErrorTemplate.plural_form_not_found(key, index, len(forms), locale),
            key=key,
            index=index,
        )
    return forms[index]
