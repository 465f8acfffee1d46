"""Query string serialization for request parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from collections.abc import Mapping


def serialize(params: Mapping[str, Any]) -> str:
    """
    Convert request parameters into a query string.

    ``None`` values are skipped and sequences are joined with commas before
    encoding, so ``{"exclude": ["hourly", "daily"], "lang": "en"}`` becomes
    ``?exclude=hourly%2Cdaily&lang=en``.

    Returns:
        The query string with its leading ``?``, or ``""`` if nothing is set.
    """
    pairs = [
        f"{key}={quote(_to_text(value), safe='')}"
        for key, value in params.items()
        if value is not None
    ]
    return f"?{'&'.join(pairs)}" if pairs else ""


def _to_text(value: Any) -> str:
    if isinstance(value, list | tuple):
        return ",".join(str(v) for v in value)
    return str(value)
