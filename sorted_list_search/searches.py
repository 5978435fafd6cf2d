from typing import Callable, Optional, Sequence

# --- Predecessor (floor) search over a sorted list ---

Trace = Optional[Callable[[str], None]]


def predecessor_search(values: Sequence, query, bounds: Optional[tuple[int, int]] = None,
                       trace: Trace = None) -> int:
    """
    Searches 'values' between the inclusive bounds (lo, hi) for the index of the
    entry preceding or equal to 'query'.

    If 'query' matches several entries, the index of the final matching entry is
    returned. If 'query' is at least values[hi], hi is returned. If 'query' is
    smaller than every entry in range, lo is returned; callers that care must
    check values[result] <= query themselves.

    'values' MUST already be sorted and the bounds must lie inside it. Neither
    condition is checked here (see checked.py).
    """
    if bounds is None:
        lo, hi = 0, len(values) - 1
    else:
        lo, hi = bounds

    # Round-half-up midpoint
    idx = (lo + hi + 1) // 2

    if trace is not None:
        trace(f"Initial bounds: [{lo} {hi}]. Initial index: [{idx}]")

    while True:
        item = values[idx]
        if trace is not None:
            trace(f"Current bounds: [{lo} {hi}]. Current index: [{idx}]. "
                  f"Search val: [{query}]. Current val: [{item}]")

        if query < item:
            if idx == lo:
                # Nothing left below; query precedes the whole range
                return lo
            # Subdivide lower
            hi = idx
            idx = (lo + hi) // 2

        elif idx == hi:
            return idx

        elif query < values[idx + 1]:
            return idx

        else:
            # Subdivide upper
            lo = idx
            idx = (lo + hi + 1) // 2


def batch_predecessor_search(values: Sequence, queries: Sequence, trace: Trace = None) -> list[int]:
    """
    Finds the predecessor index of every entry of 'queries' in 'values'.

    The first and last queries are located first; every interior query is then
    searched between the previous result and the last query's result, so the
    lower bound ratchets forward as the batch proceeds. This is only correct
    when 'queries' is non-decreasing. 'queries' must not be empty.
    """
    num_items = len(queries)
    last = len(values) - 1
    locations = [0] * num_items

    # Find first item
    locations[0] = predecessor_search(values, queries[0], (0, last), trace)
    if trace is not None:
        trace(f"First item location: {locations[0]}")

    if num_items == 1:
        return locations

    # Find last item
    lo = locations[0]
    locations[-1] = predecessor_search(values, queries[-1], (lo, last), trace)
    hi = min(max(lo + 1, locations[-1]), last)
    if trace is not None:
        trace(f"Final item location: {locations[-1]}")
        trace(f"New bounds: [{lo} {hi}]")

    # Find other items
    for k in range(1, num_items - 1):
        locations[k] = predecessor_search(values, queries[k], (lo, hi), trace)
        lo = locations[k]
        if trace is not None:
            trace(f"Item {k} location: {lo}. New bounds: [{lo} {hi}]")

    return locations


# --- Baseline (Provided for Benchmarking and as a reference) ---

def search_full_scan(values: Sequence, query, bounds: Optional[tuple[int, int]] = None) -> int:
    """
    Scans the range linearly and returns the last index whose entry is <= query.
    Falls back to lo when no entry qualifies, like predecessor_search.
    """
    if bounds is None:
        lo, hi = 0, len(values) - 1
    else:
        lo, hi = bounds

    found = lo
    for i in range(lo, hi + 1):
        if values[i] <= query:
            found = i
        else:
            break
    return found
