"""
Rendering values as the text a browser would produce.

**Conceptual**: Several helpers write values into strings that a JavaScript
front end reads back: storage entries, query strings, CSS colors, URLs.
number_to_text() renders Python values the way JavaScript's String() does, so
True becomes "true", 1.0 becomes "1" and None becomes "null".
"""

from typing import Any

# Number.prototype.toString switches to exponent form from 1e21 upwards
_PLAIN_DIGITS_LIMIT = 1e21


def number_to_text(value: Any) -> str:
    """
    Render a value the way JavaScript's String() would.

    Examples:
        >>> number_to_text(1.0)
        '1'
        >>> number_to_text(1e16)
        '10000000000000000'
        >>> number_to_text(None)
        'null'

    Non-numbers other than None and booleans are passed through str().
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < _PLAIN_DIGITS_LIMIT:
        return str(int(value))
    return str(value)
