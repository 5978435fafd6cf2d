import numpy as np

from .checked import checked_batch_predecessor_search
from .errors import KindMismatchError, UnsupportedKindError
from .searches import Trace, batch_predecessor_search
from .utils import to_one_based

# --- Numeric-array entry points ---
# Sorted list and search items arrive as flat numeric arrays; the result is a
# new array of the same kind holding one 1-based index per item.

SUPPORTED_KINDS = (np.dtype(np.float64), np.dtype(np.int32))


def _as_kind(x, dtype, checked: bool) -> np.ndarray:
    """Flattens 'x' into an array of 'dtype'. When checked, refuses any lossy conversion."""
    raw = np.asarray(x)
    if not checked or raw.dtype == dtype:
        return np.asarray(raw, dtype=dtype).ravel()

    if not np.can_cast(raw.dtype, dtype, casting="same_kind"):
        raise KindMismatchError(f"Cannot search '{raw.dtype}' input with the '{np.dtype(dtype)}' variant.")
    converted = raw.astype(dtype)
    if not np.array_equal(converted, raw, equal_nan=True):
        raise KindMismatchError(f"Input does not fit in '{np.dtype(dtype)}' without loss.")
    return converted.ravel()


def _search_kind(values, items, dtype, checked: bool, trace: Trace) -> np.ndarray:
    values = _as_kind(values, dtype, checked)
    items = _as_kind(items, dtype, checked)

    if checked:
        locations = checked_batch_predecessor_search(values, items, trace)
    else:
        locations = batch_predecessor_search(values, items, trace)

    return to_one_based(locations, dtype)


def binary_search_sorted_list_double(values, items, *, checked: bool = False, trace: Trace = None) -> np.ndarray:
    """
    Returns, for every entry of 'items', the 1-based index of the entry of
    'values' preceding or equal to it. Both inputs are treated as float64.

    'values' MUST already be sorted; this is only verified when checked=True.
    Without checking, 'items' is assumed non-decreasing as well, and inputs of
    another kind are converted the way numpy casts them (float to int truncates
    toward zero). With checked=True a lossy conversion raises KindMismatchError.
    """
    return _search_kind(values, items, np.float64, checked, trace)


def binary_search_sorted_list_int32(values, items, *, checked: bool = False, trace: Trace = None) -> np.ndarray:
    """int32 variant of binary_search_sorted_list_double."""
    return _search_kind(values, items, np.int32, checked, trace)


def binary_search_sorted_list(values, items, *, checked: bool = False, trace: Trace = None) -> np.ndarray:
    """
    Dispatches to the float64 or int32 variant based on the arrays' element kind.
    Raises UnsupportedKindError or KindMismatchError if no variant applies.
    """
    values = np.asarray(values)
    items = np.asarray(items)

    if values.dtype not in SUPPORTED_KINDS:
        raise UnsupportedKindError(f"No search variant for element kind '{values.dtype}'.")
    if items.dtype != values.dtype:
        raise KindMismatchError(
            f"Sorted list is '{values.dtype}' but search items are '{items.dtype}'.")

    if values.dtype == np.float64:
        return binary_search_sorted_list_double(values, items, checked=checked, trace=trace)
    return binary_search_sorted_list_int32(values, items, checked=checked, trace=trace)
