"""Nesting limits for AST walkers.

DepthGuard bounds recursion into tag children; depth_clamp keeps the
limit below what the interpreter can recurse.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from tagtranslate.constants import MAX_DEPTH
from tagtranslate.core.depth_guard import DepthGuard, depth_clamp
from tagtranslate.diagnostics import DiagnosticCode, NestingTooDeepError, TranslateError

# ============================================================================
# Limits
# ============================================================================


class TestGuardLimit:
    """Configured and clamped limits."""

    def test_starts_empty_with_library_limit(self) -> None:
        fresh = DepthGuard()

        assert (fresh.max_depth, fresh.depth) == (MAX_DEPTH, 0)

    def test_explicit_limit_kept(self) -> None:
        assert DepthGuard(max_depth=25).max_depth == 25

    def test_oversized_limit_clamped(self) -> None:
        """A limit the interpreter cannot recurse to is lowered on creation."""
        recursion_limit = sys.getrecursionlimit()

        assert DepthGuard(max_depth=recursion_limit * 3).max_depth == (
            recursion_limit - 50
        ) // 2


# ============================================================================
# Entering Levels
# ============================================================================


class TestEnteringLevels:
    """Context manager bookkeeping."""

    def test_levels_counted_while_inside(self) -> None:
        seen = []
        counter = DepthGuard(max_depth=5)

        with counter:
            seen.append(counter.depth)
            with counter:
                seen.append(counter.depth)
            seen.append(counter.depth)

        assert seen == [1, 2, 1]
        assert counter.depth == 0

    def test_one_level_past_limit_raises(self) -> None:
        shallow = DepthGuard(max_depth=1)

        with shallow, pytest.raises(NestingTooDeepError) as exc_info, shallow:
            pytest.fail("entered a level past the limit")

        error = exc_info.value
        assert error.max_depth == 1
        assert "Maximum nesting depth (1) exceeded" in str(error)

    def test_unrelated_exception_unwinds_level(self) -> None:
        counter = DepthGuard(max_depth=4)

        with counter:
            with pytest.raises(KeyError), counter:
                raise KeyError("tag")
            assert counter.depth == 1

        assert counter.depth == 0

    def test_refused_level_not_counted(self) -> None:
        """A level refused by __enter__ leaves the count untouched."""
        counter = DepthGuard(max_depth=1)

        with counter:
            with pytest.raises(NestingTooDeepError):
                counter.__enter__()
            assert counter.depth == 1

    def test_enter_yields_guard(self) -> None:
        counter = DepthGuard()
        with counter as same:
            assert same is counter


class TestExplicitCheck:
    """check() for callers that track depth themselves."""

    def test_below_limit(self) -> None:
        counter = DepthGuard(max_depth=3)
        counter.current_depth = 2

        counter.check()
        assert not counter.is_exceeded()

    def test_at_limit(self) -> None:
        counter = DepthGuard(max_depth=3)
        counter.current_depth = 3

        assert counter.is_exceeded()
        with pytest.raises(NestingTooDeepError) as exc_info:
            counter.check()

        assert isinstance(exc_info.value, TranslateError)
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.NESTING_TOO_DEEP


# ============================================================================
# depth_clamp
# ============================================================================


class TestDepthClamp:
    """Clamping against sys.getrecursionlimit()."""

    def test_small_request_unchanged(self) -> None:
        assert depth_clamp(10) == 10

    @pytest.mark.parametrize("reserve", [0, 50, 120])
    def test_large_request_lowered(self, reserve: int) -> None:
        recursion_limit = sys.getrecursionlimit()
        assert depth_clamp(recursion_limit, reserve_frames=reserve) == (
            recursion_limit - reserve
        ) // 2

    def test_warning_names_both_limits(self, caplog: pytest.LogCaptureFixture) -> None:
        recursion_limit = sys.getrecursionlimit()
        with caplog.at_level(logging.WARNING, logger="tagtranslate.core.depth_guard"):
            depth_clamp(recursion_limit + 1)

        assert f"recursion limit {recursion_limit}" in caplog.text

    def test_silent_when_unchanged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="tagtranslate.core.depth_guard"):
            depth_clamp(MAX_DEPTH)

        assert caplog.records == []


# ============================================================================
# Properties
# ============================================================================


class TestGuardProperties:
    """Property-based guard tests."""

    @given(limit=st.integers(min_value=1, max_value=80))
    def test_recursive_walk_stops_at_limit(self, limit: int) -> None:
        """A walker may descend exactly limit levels."""
        event(f"limit={limit}")
        counter = DepthGuard(max_depth=limit)

        def descend(levels: int) -> int:
            if levels == 0:
                return counter.depth
            with counter:
                return descend(levels - 1)

        assert descend(limit) == limit
        with pytest.raises(NestingTooDeepError):
            descend(limit + 1)
        assert counter.depth == 0

    @given(
        requested=st.integers(min_value=1, max_value=50_000),
        reserve=st.integers(min_value=0, max_value=300),
    )
    @example(requested=MAX_DEPTH, reserve=50)
    def test_clamped_limit_fits_interpreter(self, requested: int, reserve: int) -> None:
        """Two frames per level plus the reserve fit the recursion limit."""
        clamped = depth_clamp(requested, reserve_frames=reserve)
        event("clamped" if clamped < requested else "unchanged")

        assert clamped <= requested
        assert 2 * clamped + reserve <= sys.getrecursionlimit()
