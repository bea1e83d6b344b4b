"""
Thousand-separator formatting with arbitrary precision.

Values are handled as decimal.Decimal so large amounts and long fractions are
never distorted by binary floating point. Rounding is half-up, as people
expect for money.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Optional

NOT_AVAILABLE = "N/A"

# Enough digits that quantize() never overflows the context for realistic input
_PRECISION = 1000

_GROUP_PATTERN = re.compile(r"\d(?=(?:\d{3})+$)")


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip()) if not isinstance(value, Decimal) else value
    except (InvalidOperation, ValueError, TypeError):
        return None
    return number if number.is_finite() else None


def _plain(number: Decimal) -> str:
    """Positional notation without trailing zeros (Decimal("1.50") -> "1.5")."""
    text = format(number.normalize(), "f")
    return "0" if text in ("-0", "") else text


def format_with_thousand_separator(
    value: Any,
    keep_fractions: bool = False,
    fraction_digits: Optional[int] = None,
    hide_fract_if_integer: bool = False,
) -> str:
    """
    Format a number with "," between thousands groups of the integer part.

    Args:
        value: int, float, Decimal or numeric string.
        keep_fractions: Keep the fraction exactly as given (trailing zeros dropped).
        fraction_digits: Round to this many decimals. Ignored when
                         keep_fractions or hide_fract_if_integer is set.
        hide_fract_if_integer: Like keep_fractions, but integers print
                               without a fractional part.

    Returns:
        Formatted string, or "N/A" when value is not a finite number.

    Examples:
        >>> format_with_thousand_separator(1234567.891)
        '1,234,567.89'
        >>> format_with_thousand_separator("1234.5", keep_fractions=True)
        '1,234.5'
        >>> format_with_thousand_separator(1000, fraction_digits=0)
        '1,000'
    """
    number = _to_decimal(value)
    if number is None:
        return NOT_AVAILABLE

    if keep_fractions or hide_fract_if_integer:
        text = _plain(number)
    else:
        digits = fraction_digits if isinstance(fraction_digits, int) and fraction_digits >= 0 else 2
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            text = format(number.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP), "f")

    integer_part, dot, fraction_part = text.partition(".")
    grouped = _GROUP_PATTERN.sub(lambda match: match.group(0) + ",", integer_part)
    return grouped + dot + fraction_part


def get_number_from_thousand_separator_formatted_string(text: str) -> Optional[float]:
    """
    Parse a string produced by format_with_thousand_separator back to a float.

    Returns:
        The number, or None if the string is not numeric once commas are removed.
    """
    if not isinstance(text, str):
        return None
    number = _to_decimal(text.replace(",", ""))
    return float(number) if number is not None else None
