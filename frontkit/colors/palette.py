"""
Random selection from a fixed palette of bright pastel colors.

**Conceptual**: Charts need a handful of distinguishable colors per render.
get_random_pastel_colors() draws them without replacement, so a series never
shares a color with another, and uses the secure integer generator so draws
are free of modulo bias.
"""

from decimal import ROUND_FLOOR, Decimal
from typing import Any, List

from frontkit.numbers.crypto_random import get_crypto_random_int
from frontkit.numbers.validation import is_numeric
from frontkit.utils.text import number_to_text

PASTEL_COLORS = (
    # Reds
    "#ff0000",
    "#dc143c",
    "#ff4500",
    "#ff6347",
    # Oranges
    "#ff8c00",
    "#ffbb28",
    "#f1935c",
    "#ea907a",
    "#ffa07a",
    # Yellows
    "#ffd700",
    "#ffff00",
    "#c7f000",
    "#ffee93",
    "#faf0af",
    "#f0e68c",
    # Yellow-greens / greens
    "#7fff00",
    "#32cd32",
    "#00ff00",
    "#1cb54e",
    "#a7e9af",
    # Green to cyan
    "#00fa9a",
    "#00c49f",
    "#2fc4c6",
    "#00ffff",
    "#00ced1",
    # Blues
    "#0088fe",
    "#588da8",
    "#4f6d7a",
    "#679b9b",
    "#95b8d1",
    "#a6ade0",
    "#0000ff",
    # Purples
    "#8a2be2",
    "#9400d3",
    "#b040cc",
    "#851372",
    # Pinks
    "#ff00ff",
    "#d8345f",
    "#ff1493",
    "#ff69b4",
    "#fb6f92",
    "#db7093",
    "#ffa8bb",
    "#ffd1dc",
    "#d4b5b0",
)


def get_random_pastel_colors(count: Any) -> List[str]:
    """
    Return count unique colors from PASTEL_COLORS in random order.

    Args:
        count: How many colors to return. Floored and clamped to
               [1, len(PASTEL_COLORS)]. A non-numeric count returns the
               whole palette (shuffled).

    Returns:
        List of distinct hex color strings.

    Example:
        >>> get_random_pastel_colors(3)
        ['#ffa8bb', '#1cb54e', '#95b8d1']
    """
    palette_size = len(PASTEL_COLORS)

    if not is_numeric(count):
        wanted = palette_size
    else:
        # Decimal keeps arbitrarily large ints comparable without overflow
        numeric = Decimal(number_to_text(count))
        if numeric >= palette_size:
            wanted = palette_size
        else:
            wanted = max(int(numeric.to_integral_value(rounding=ROUND_FLOOR)), 1)

    result: List[str] = []
    used = set()

    while len(result) < wanted:
        index = get_crypto_random_int(0, palette_size - 1)
        if index not in used:
            used.add(index)
            result.append(PASTEL_COLORS[index])

    return result
