"""
Color format conversion.
"""

import re
from typing import Any, Optional

from frontkit.utils.text import number_to_text

_HEX_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE | re.ASCII)


def hex_to_rgba(hex_color: str, alpha: Any = 1) -> Optional[str]:
    """
    Convert a 6-digit HEX color to an rgba() CSS string.

    Args:
        hex_color: "#ae951e" or "ae951e" (case-insensitive).
        alpha: Opacity in [0, 1]. Anything outside that range, or not a
               number, becomes 1.

    Returns:
        e.g. "rgba(174, 149, 30, 1)", or None if hex_color is not a 6-digit HEX color.
    """
    match = _HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        return None

    if isinstance(alpha, bool) or not isinstance(alpha, (int, float)) or not 0 <= alpha <= 1:
        alpha = 1

    red, green, blue = (int(group, 16) for group in match.groups())
    return f"rgba({red}, {green}, {blue}, {number_to_text(alpha)})"
