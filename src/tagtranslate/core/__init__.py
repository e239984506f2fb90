"""Core utilities shared across syntax, runtime and validation layers.

This package provides foundational utilities that the parser, formatter
and validator all depend on. By isolating them here, we maintain a clean
dependency graph:

    core <- syntax <- runtime <- validation

Exports:
    DepthGuard: Context manager for recursion depth limiting
    NestingTooDeepError: Exception raised when depth limit exceeded

Python 3.13+.
"""

from .depth_guard import DepthGuard, NestingTooDeepError, depth_clamp

__all__ = ["DepthGuard", "NestingTooDeepError", "depth_clamp"]
