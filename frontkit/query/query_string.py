"""
Nested dict to PHP-style query string serialization.

**Conceptual**: Backends built on PHP (and many others) decode bracketed keys
into nested structures: "filters[active]=true&tags[]=a&tags[]=b" becomes
{"filters": {"active": "true"}, "tags": ["a", "b"]}. url_query_string_from_object()
produces that encoding from a dict.

**Rules** (applied recursively with the key path built so far):
  - None, callables, NaN and +/-inf are skipped (no key emitted).
  - datetime values are written as UTC ISO-8601 ("2025-10-17T12:30:34.081Z").
  - Lists and tuples: each element goes under "key[]". A dict element is
    flattened one level as "key[][prop]"; its values are serialized with the
    same rules.
  - Dicts: each entry goes under "key[prop]".
  - Anything else: "key=value" with value percent-encoded like JavaScript's
    encodeURIComponent (booleans as "true"/"false", 1.0 as "1").

Keys are emitted as given (not encoded), in dict insertion order.
"""

import math
from datetime import datetime
from typing import Any, Dict, List
from urllib.parse import quote

from frontkit.dates.formatters import to_iso_string
from frontkit.utils.text import number_to_text
from frontkit.types.guards import is_plain_object

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _encode(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def _is_skipped(value: Any) -> bool:
    if value is None or callable(value):
        return True
    return isinstance(value, float) and not math.isfinite(value)


def _build_query(parts: List[str], key_prefix: str, value: Any) -> None:
    if _is_skipped(value):
        return

    if isinstance(value, (list, tuple)):
        for item in value:
            if is_plain_object(item):
                for sub_key, sub_value in item.items():
                    _build_query(parts, f"{key_prefix}[][{sub_key}]", sub_value)
            else:
                _build_query(parts, f"{key_prefix}[]", item)
        return

    if isinstance(value, datetime):
        parts.append(f"{key_prefix}={_encode(to_iso_string(value))}")
        return

    if is_plain_object(value):
        for sub_key, sub_value in value.items():
            _build_query(parts, f"{key_prefix}[{sub_key}]", sub_value)
        return

    parts.append(f"{key_prefix}={_encode(number_to_text(value))}")


def url_query_string_from_object(obj: Dict[str, Any]) -> str:
    """
    Serialize a dict into a "?"-prefixed, PHP-style query string.

    Args:
        obj: Dict to serialize.

    Returns:
        "?key=value&..." or "" when obj is not a dict, is empty, or every
        value was skipped.

    Example:
        >>> url_query_string_from_object({"page": 1, "tags": ["a", "b"]})
        '?page=1&tags[]=a&tags[]=b'
        >>> url_query_string_from_object({"filters": {"active": True}})
        '?filters[active]=true'
    """
    if not is_plain_object(obj) or not obj:
        return ""

    parts: List[str] = []
    for key, value in obj.items():
        _build_query(parts, str(key), value)

    return "?" + "&".join(parts) if parts else ""
