"""Deep equality used for attribute change detection."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any


def deep_equal(a: Any, b: Any) -> bool:
    """Compare two values structurally.

    Stricter than `==`: values of different types are never equal (so
    `1`, `1.0` and `True` all differ), and NaN equals NaN. Lists, tuples
    and mappings are compared element by element.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if both values are of the same type and structurally equal.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, float):
        return a == b or (math.isnan(a) and math.isnan(b))
    if isinstance(a, Mapping):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[key], b[key]) for key in a)
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b, strict=True))
    return bool(a == b)
