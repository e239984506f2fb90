"""Nesting depth limit shared by every AST walker.

Messages nest tags, and the formatter, validator, serializer and
introspection all recurse into tag children. One guard type bounds that
recursion so hostile input such as "<a><a><a>..." or a hand-built AST
fails with NestingTooDeepError instead of RecursionError.

The parser is iterative and uses check() directly on its open-tag count.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from tagtranslate.constants import MAX_DEPTH
from tagtranslate.diagnostics import ErrorTemplate, NestingTooDeepError

__all__ = ["DepthGuard", "NestingTooDeepError", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Counts nesting levels and raises once the limit is reached.

    Usage in a recursive walker:
        guard = DepthGuard(max_depth=self._max_depth)
        with guard:
            self._walk(tag.children, guard)

    One guard per top-level call; the counter is plain instance state, so
    concurrent calls never share a guard.

    Attributes:
        max_depth: Levels allowed, clamped to what the interpreter can recurse
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # check before counting: a raising __enter__ gets no __exit__
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Levels currently entered."""
        return self.current_depth

    def is_exceeded(self) -> bool:
        """True when entering one more level would raise."""
        return self.current_depth >= self.max_depth

    def check(self) -> None:
        """Raise if no further level may be entered.

        Raises:
            NestingTooDeepError: current_depth has reached max_depth
        """
        if self.is_exceeded():
            raise NestingTooDeepError(
                ErrorTemplate.nesting_too_deep(self.max_depth),
                max_depth=self.max_depth,
            )


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower a nesting limit until the recursive walkers can honor it.

    Each nesting level costs two interpreter frames in the walkers
    (the node loop and the guarded child call).

    Args:
        requested_depth: Desired nesting limit
        reserve_frames: Frames kept free for callers (default: 50)

    Returns:
        requested_depth, or the largest safe limit if that is smaller

    Example:
        >>> sys.setrecursionlimit(400)
        >>> depth_clamp(100)
        100
        >>> depth_clamp(500)
        175
    """
    safe_depth = (sys.getrecursionlimit() - reserve_frames) // 2
    if requested_depth <= safe_depth:
        return requested_depth

    logger.warning(
        "Nesting limit %d too high for recursion limit %d. Clamping to %d.",
        requested_depth,
        sys.getrecursionlimit(),
        safe_depth,
    )
    return safe_depth
