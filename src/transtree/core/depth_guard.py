"""Depth limiting for recursive tree walks.

Prevents stack overflow when parsing or serializing adversarially deep
translation documents. Parsing and serialization recurse once per section
level; the guard turns runaway nesting into a MalformedTreeError subclass
instead of a RecursionError.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from transtree.constants import MAX_DEPTH
from transtree.diagnostics import TreeDepthExceededError

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard()
        with guard:
            children = self._parse_section(value, ...)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
        path: Dot-path reported when the limit is hit
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)
    path: str = field(default="", init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing: __exit__ is not called
        when __enter__ raises, so incrementing first would leave
        current_depth permanently elevated.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    def check(self) -> None:
        """Raise if the depth limit has been reached.

        Raises:
            TreeDepthExceededError: If depth limit exceeded
        """
        if self.current_depth >= self.max_depth:
            msg = f"Maximum section nesting depth ({self.max_depth}) exceeded"
            raise TreeDepthExceededError(msg, path=self.path)


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary
    """
    max_safe_depth = sys.getrecursionlimit() - reserve_frames
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). Clamping to %d.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
