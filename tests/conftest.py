"""Shared pytest setup for the tagtranslate tests.

Hypothesis profiles (max_examples):
- dev: 500, the default for local runs
- ci: 50, derandomized; selected when CI=true
- verbose: 100 with per-example output

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked @pytest.mark.fuzz are long-running property tests. They are
skipped unless the run selects them with -m fuzz.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from tagtranslate.locale_utils import get_babel_locale
from tagtranslate.runtime.plural_rules import get_plural_rule
from tagtranslate.syntax import MessageParser

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in ("dev", "ci", "verbose"):
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def parser() -> MessageParser:
    """Parser with the default nesting limit."""
    return MessageParser()


@pytest.fixture
def fresh_locale_caches() -> Iterator[None]:
    """Drop cached plural rules and Babel locales around a test."""
    get_plural_rule.cache_clear()
    get_babel_locale.cache_clear()
    yield
    get_plural_rule.cache_clear()
    get_babel_locale.cache_clear()


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property tests, skipped unless selected with -m fuzz",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test: run with pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
