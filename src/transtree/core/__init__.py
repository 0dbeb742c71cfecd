"""Core utilities shared across the tree and editing layers.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    depth_clamp: Clamp a depth limit against the interpreter recursion limit

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp

__all__ = ["DepthGuard", "depth_clamp"]
