"""Query-string assembly."""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any


def _serialize(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_query(filters: Mapping[str, Any] | None, keys: Iterable[str] | None = None) -> dict[str, str]:
    """
    Keep only the filter fields that carry a value.

    None and empty strings are dropped, never sent as text. False and 0
    are real values and are kept.

    Args:
        filters: Raw filter mapping.
        keys: Optional allow-list, in output order.

    Returns:
        Mapping ready to be passed as ``params``.
    """
    if not filters:
        return {}

    names = list(keys) if keys is not None else list(filters.keys())
    params: dict[str, str] = {}
    for name in names:
        value = filters.get(name)
        if value is None:
            continue
        if isinstance(value, str) and value.strip() == "":
            continue
        params[name] = _serialize(value)
    return params
