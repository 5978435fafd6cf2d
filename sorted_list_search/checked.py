import operator
from typing import Optional, Sequence

from .errors import EmptyInputError, InvalidQueryError, InvalidRangeError, UnsortedInputError
from .searches import Trace, batch_predecessor_search, predecessor_search
from .utils import is_nan, is_non_decreasing

# --- Checked entry points ---
# Every precondition of the fast path in searches.py is verified first and
# violations raise a SearchError subclass. Unsorted search items are searched
# over the full range instead of the ratcheting bounds, so they stay correct.


def validate_values(values: Sequence):
    if len(values) == 0:
        raise EmptyInputError("The sorted list is empty.")
    if not is_non_decreasing(values):
        raise UnsortedInputError("The list to search must be sorted in non-decreasing order.")


def validate_bounds(values: Sequence, bounds: Optional[tuple[int, int]]) -> tuple[int, int]:
    if bounds is None:
        return 0, len(values) - 1
    try:
        lo, hi = (operator.index(b) for b in bounds)
    except (TypeError, ValueError):
        raise InvalidRangeError(f"Bounds {bounds!r} must be a pair of integers.") from None
    if not 0 <= lo <= hi < len(values):
        raise InvalidRangeError(f"Bounds [{lo} {hi}] are invalid for a list of length {len(values)}.")
    return lo, hi


def validate_query(query):
    if is_nan(query):
        raise InvalidQueryError("Cannot search for NaN.")


def checked_predecessor_search(values: Sequence, query, bounds: Optional[tuple[int, int]] = None,
                               trace: Trace = None) -> int:
    """Validating variant of predecessor_search."""
    validate_values(values)
    bounds = validate_bounds(values, bounds)
    validate_query(query)
    return predecessor_search(values, query, bounds, trace)


def checked_batch_predecessor_search(values: Sequence, queries: Sequence, trace: Trace = None) -> list[int]:
    """
    Validating variant of batch_predecessor_search.

    Unsorted queries are accepted (they are a legal input, only the ratchet
    optimisation assumes order), but every query is searched over the full
    range in that case so the results stay correct.
    """
    validate_values(values)
    if len(queries) == 0:
        raise EmptyInputError("There are no items to search for.")
    for query in queries:
        validate_query(query)

    if is_non_decreasing(queries):
        return batch_predecessor_search(values, queries, trace)
    return [predecessor_search(values, query, None, trace) for query in queries]
