"""Arithmetic service: fixed-width integer operations.

Results follow signed 32-bit semantics: overflow wraps around instead of
raising, so ``wrapping_sum(INT32_MAX, 1) == INT32_MIN``.
"""

import logging

logger = logging.getLogger(__name__)

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1
_INT32_RANGE = 2**32


def to_int32(value: int) -> int:
    """Reinterpret an arbitrary integer as a signed 32-bit value."""
    return (value - INT32_MIN) % _INT32_RANGE + INT32_MIN


def wrapping_sum(a: int, b: int) -> int:
    """Add two integers with 32-bit wraparound.

    Args:
        a: First operand
        b: Second operand

    Returns:
        ``a + b`` reduced modulo 2^32 into the signed 32-bit range.
    """
    logger.info("Calculating sum", extra={"a": a, "b": b})
    return to_int32(a + b)
