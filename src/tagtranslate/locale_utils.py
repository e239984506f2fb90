"""Locale code handling for plural rule lookup.

Callers pass BCP-47 ("pt-BR") or POSIX ("pt_BR") codes in any case; rule
tables are keyed by lowercase POSIX codes.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_lookup_keys",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Strip whitespace and turn BCP-47 hyphens into POSIX underscores.

    Case is preserved; Babel accepts either.

        >>> normalize_locale(" sr-Latn-RS ")
        'sr_Latn_RS'
    """
    return locale_code.strip().replace("-", "_")


def locale_lookup_keys(locale_code: str) -> tuple[str, ...]:
    """Return lowercase lookup keys from most to least specific.

    Example:
        >>> locale_lookup_keys("pt-BR")
        ('pt_br', 'pt')
        >>> locale_lookup_keys("sr_Latn_RS")
        ('sr_latn_rs', 'sr_latn', 'sr')
    """
    parts = normalize_locale(locale_code).lower().split("_")
    return tuple("_".join(parts[:end]) for end in range(len(parts), 0, -1))


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parsed Babel locale for a code, memoized per distinct input string.

    Only consulted for locales missing from the built-in plural table.

    Raises:
        babel.core.UnknownLocaleError: Babel has no CLDR data for the code
        ValueError: The code is not a well-formed locale identifier
    """
    # Babel is imported on first use; most lookups never reach it
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
