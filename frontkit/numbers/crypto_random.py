"""
Cryptographically secure bounded random integers.

**Conceptual**: secrets.randbits(32) gives uniform 32-bit words. Reducing a
word with "% range" is biased whenever 2**32 is not a multiple of range, so
words at or above the largest multiple are rejected and redrawn (rejection
sampling). The expected number of draws is below 2 for every range.

get_crypto_random_int() never raises: bad bounds are replaced with safe
defaults instead.
"""

import math
import secrets
from typing import Any, Optional

MAX_SAFE_INTEGER = 2 ** 53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER
WORD_SPACE = 2 ** 32


def _sanitize_bound(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not math.isfinite(value):
        return default
    # Half-up rounding, so -2.5 -> -2 and 2.5 -> 3
    rounded = math.floor(value + 0.5)
    return max(MIN_SAFE_INTEGER, min(MAX_SAFE_INTEGER, rounded))


def get_crypto_random_int(min_value: Optional[float] = None, max_value: Optional[float] = None) -> int:
    """
    Return a uniform secure random integer in [min_value, max_value].

    **Defensive behaviour**:
      - Missing or non-finite min_value -> 0, max_value -> 1.
      - Bounds are rounded half-up and clamped to +/-(2**53 - 1).
      - Inverted bounds are swapped.
      - A range wider than 2**32 values falls back to [0, 1].

    Examples:
        >>> get_crypto_random_int(1, 45)   # 1..45
        >>> get_crypto_random_int()        # 0 or 1
        >>> get_crypto_random_int(10, 3)   # 3..10
    """
    low = _sanitize_bound(min_value, 0)
    high = _sanitize_bound(max_value, 1)

    if low > high:
        low, high = high, low

    span = high - low + 1
    if span > WORD_SPACE:
        low, high, span = 0, 1, 2

    limit = WORD_SPACE - (WORD_SPACE % span)

    while True:
        word = secrets.randbits(32)
        if word < limit:
            return low + word % span
