"""Utility functions for dataset compliance editing."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any


def fleece(keys: Iterable[str]) -> Callable[[Mapping[str, Any]], dict[str, Any]]:
    """Build a function that copies a mapping without the given keys.

    The returned function never mutates its argument: it constructs a new
    dict holding every remaining key and value, in the original key order.

    Args:
        keys: Keys to omit from each copied mapping

    Returns:
        Function taking a mapping and returning a new dict without ``keys``

    Example:
        ```python
        strip_readonly = fleece(["readonly"])
        strip_readonly({"identifierField": "memberId", "readonly": True})
        # {"identifierField": "memberId"}
        ```

    """
    omitted = frozenset(keys)

    def _fleece(source: Mapping[str, Any]) -> dict[str, Any]:
        return {key: value for key, value in source.items() if key not in omitted}

    return _fleece
