"""
Numeric string/number validation.

**Conceptual**: is_numeric() answers "does this look like a number the user is
allowed to type?" for input fields. It works on the textual form, so partial
input such as "12." passes while "12a" does not. Three independent options
select the grammar: not_negative, is_integer and allow_empty.
"""

import re
from typing import Any

from frontkit.utils.text import number_to_text

_NUMERIC_PATTERNS = {
    (False, False): re.compile(r"^-?[0-9]*\.?[0-9]*$"),
    (True, False): re.compile(r"^[0-9]*\.?[0-9]*$"),
    (False, True): re.compile(r"^-?[0-9]*$"),
    (True, True): re.compile(r"^[0-9]*$"),
}

# Strings every grammar above would accept but which are not numbers
_MALFORMED = frozenset({".", "-.", "-"})


def is_numeric(
    value: Any,
    not_negative: bool = False,
    is_integer: bool = False,
    allow_empty: bool = False,
) -> bool:
    """
    Check whether value is a numeric string or number under the given options.

    Args:
        value: Candidate value. Anything other than str, int or float
               (including bool and None) is rejected.
        not_negative: Disallow a leading "-".
        is_integer: Disallow a decimal point.
        allow_empty: Treat "" as valid.

    Returns:
        True if value matches the selected grammar.

    Examples:
        >>> is_numeric("-12.3")
        True
        >>> is_numeric("4.2", is_integer=True)
        False
        >>> is_numeric("-.")
        False
        >>> is_numeric("", allow_empty=True)
        True
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return False

    text = number_to_text(value)

    if text in _MALFORMED:
        return False

    if text == "":
        return allow_empty

    return _NUMERIC_PATTERNS[(bool(not_negative), bool(is_integer))].fullmatch(text) is not None
