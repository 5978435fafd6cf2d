import numpy as np
from typing import Sequence

# --- Helpers shared by the checked search and the array boundary ---

def is_non_decreasing(values: Sequence) -> bool:
    """
    Returns True if every entry of 'values' is <= its successor.
    NaN entries make a floating-point list unsorted, since they have no order.
    """
    if isinstance(values, np.ndarray) and np.issubdtype(values.dtype, np.number):
        if np.issubdtype(values.dtype, np.floating) and np.isnan(values).any():
            return False
        return bool(np.all(values[1:] >= values[:-1]))
    if any(is_nan(v) for v in values):
        return False
    return all(a <= b for a, b in zip(values, values[1:]))


def is_nan(value) -> bool:
    """True only for floating-point NaN; other kinds are never NaN."""
    return isinstance(value, (float, np.floating)) and bool(np.isnan(value))


def to_one_based(locations: list[int], dtype) -> np.ndarray:
    """Converts 0-based result indices into a freshly allocated 1-based array of 'dtype'."""
    return np.asarray(locations, dtype=dtype) + 1
