class SearchError(ValueError):
    """Base class for the errors raised by the checked search entry points."""


class EmptyInputError(SearchError):
    """The sorted list or the list of search items is empty."""


class InvalidRangeError(SearchError):
    """The search bounds do not satisfy 0 <= lo <= hi < len(values)."""


class UnsortedInputError(SearchError):
    """The list to search is not in non-decreasing order."""


class InvalidQueryError(SearchError):
    """A search item cannot be ordered against the list (e.g. NaN)."""


class UnsupportedKindError(SearchError):
    """The array element kind has no search variant."""


class KindMismatchError(SearchError):
    """The sorted list and the search items have different element kinds."""
