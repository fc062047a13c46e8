"""
Utility functions.

This module provides helpers for:
- Quantum state comparison (accounting for global phase)
- Bit/integer conversion
- Marking renamed functions as deprecated
"""

import functools
import warnings
import numpy as np
from typing import Callable, List

# Default absolute tolerance for state comparisons
DEFAULT_ATOL = 1e-9


# =============================================================================
# Quantum state utilities
# =============================================================================

def allclose_up_to_global_phase(v, w, atol: float = DEFAULT_ATOL) -> bool:
    """
    Check if two quantum states are equal up to a global phase.

    Global phase has no physical significance, and a controlled operation's
    global phase becomes a relative one, so compare with this only when the
    operation is never controlled afterwards.

    Args:
        v: First quantum state (array-like)
        w: Second quantum state (array-like)
        atol: Absolute tolerance for comparison

    Returns:
        True if states are equal up to global phase
    """
    v = np.asarray(v).reshape(-1)
    w = np.asarray(w).reshape(-1)

    # Find a stable pivot amplitude in w
    idx = np.argmax(np.abs(w))
    if np.abs(w[idx]) < atol:
        # Both should be ~0 vectors; fallback to direct comparison
        return np.allclose(v, w, atol=atol)

    phase = v[idx] / w[idx]
    return np.allclose(v, phase * w, atol=atol)


# =============================================================================
# Binary utilities
# =============================================================================

def int_to_bits(x: int, n: int) -> List[int]:
    """
    Convert integer to list of bits (LSB first).

    Args:
        x: Integer to convert
        n: Number of bits

    Returns:
        List of n bits, LSB first
    """
    return [(x >> i) & 1 for i in range(n)]


def bits_to_int(bits: List[int]) -> int:
    """Convert list of bits (LSB first) to integer."""
    result = 0
    for i, bit in enumerate(bits):
        result += bit * (2 ** i)
    return result


# =============================================================================
# Deprecation
# =============================================================================

def deprecated(replacement: str) -> Callable:
    """
    Mark a function as a deprecated alias of ``replacement``.

    The wrapped function still runs; each call first emits a
    ``DeprecationWarning`` pointing at the caller.

    Example:
        @deprecated("increment_by_integer")
        def integer_increment_le(increment, register):
            increment_by_integer(increment)(register)
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            warnings.warn(
                f"{func.__name__} is deprecated. Use {replacement} instead.",
                DeprecationWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)
        return wrapper
    return decorator
