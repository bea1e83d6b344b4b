"""
Runtime shape and nullability checks.
"""

from typing import Any, Optional, TypeVar

T = TypeVar("T")


def is_plain_object(value: Any) -> bool:
    """
    Return True if value is a mapping built as a plain dict.

    Examples:
        >>> is_plain_object({})
        True
        >>> is_plain_object([])
        False
        >>> is_plain_object(None)
        False
    """
    return isinstance(value, dict)


def not_empty(value: Optional[T]) -> bool:
    """
    Return True if value is not None.

    Meant for filtering: falsy values such as 0 and "" are kept.

    Example:
        >>> list(filter(not_empty, [1, None, 0, None, 3]))
        [1, 0, 3]
    """
    return value is not None
