"""
JSON encode/decode that returns None instead of raising.
"""

import json
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


def safe_json_parse(text: Optional[str]) -> Any:
    """
    Parse a JSON string, returning None on any failure.

    Returns None when text is not a string, is empty, or is not valid JSON.

    Example:
        >>> safe_json_parse('{"a": 1}')
        {'a': 1}
        >>> safe_json_parse("{not-json}") is None
        True
    """
    if not isinstance(text, str) or text == "":
        return None

    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug("Could not parse JSON: %s", e)
        return None


def safe_json_stringify(value: Any) -> Optional[str]:
    """
    Serialize value to compact JSON, returning None when it cannot be serialized.

    Circular references, unsupported types (sets, custom objects) and NaN/inf
    floats all yield None.

    Example:
        >>> safe_json_stringify({"a": 1})
        '{"a":1}'
        >>> loop = {}
        >>> loop["self"] = loop
        >>> safe_json_stringify(loop) is None
        True
    """
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("Could not serialize value to JSON: %s", e)
        return None
