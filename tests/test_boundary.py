import numpy as np
import pytest

from sorted_list_search.boundary import (
    binary_search_sorted_list, binary_search_sorted_list_double, binary_search_sorted_list_int32,
)
from sorted_list_search.errors import KindMismatchError, UnsupportedKindError, UnsortedInputError


def test_double_scenario_is_one_based():
    values = np.array([1, 3, 3, 5, 7], dtype=np.float64)
    result = binary_search_sorted_list(values, np.array([1.0, 3.0, 6.0]))
    assert result.dtype == np.float64
    assert result.tolist() == [1.0, 3.0, 4.0]


def test_int32_scenario_is_one_based():
    values = np.array([1, 3, 3, 5, 7], dtype=np.int32)
    result = binary_search_sorted_list(values, np.array([1, 3, 6], dtype=np.int32))
    assert result.dtype == np.int32
    assert result.tolist() == [1, 3, 4]


def test_single_item():
    values = np.array([10, 10, 10], dtype=np.int32)
    assert binary_search_sorted_list(values, np.array([10], dtype=np.int32)).tolist() == [3]


def test_result_is_freshly_allocated():
    values = np.array([0.0, 1.0, 2.0])
    items = np.array([0.5, 1.5])
    result = binary_search_sorted_list(values, items)
    assert result is not items and result is not values
    assert items.tolist() == [0.5, 1.5]


def test_column_vectors_are_flattened():
    values = np.array([[0.0], [1.0], [2.0], [3.0]])
    items = np.array([[0.5], [2.5]])
    assert binary_search_sorted_list_double(values, items).tolist() == [1.0, 3.0]


def test_kind_variants_coerce_inputs():
    assert binary_search_sorted_list_int32([1, 2, 3], [2, 3]).tolist() == [2, 3]
    assert binary_search_sorted_list_double([1, 2, 3], [2.5]).tolist() == [2.0]


def test_unsupported_kind():
    with pytest.raises(UnsupportedKindError):
        binary_search_sorted_list(np.array([1, 2], dtype=np.int16), np.array([1], dtype=np.int16))


def test_kind_mismatch():
    with pytest.raises(KindMismatchError):
        binary_search_sorted_list(np.array([1.0, 2.0]), np.array([1], dtype=np.int32))


def test_checked_mode_rejects_unsorted():
    with pytest.raises(UnsortedInputError):
        binary_search_sorted_list(np.array([2.0, 1.0]), np.array([1.0]), checked=True)


def test_checked_mode_handles_unsorted_items():
    values = np.arange(10, dtype=np.int32)
    items = np.array([2, 8, 1, 9], dtype=np.int32)
    assert binary_search_sorted_list(values, items, checked=True).tolist() == [3, 9, 2, 10]


def test_trace_sink():
    messages = []
    values = np.array([1.0, 3.0, 3.0, 5.0, 7.0])
    result = binary_search_sorted_list(values, np.array([1.0, 3.0, 6.0]), trace=messages.append)
    assert result.tolist() == [1.0, 3.0, 4.0]
    assert "First item location: 0" in messages


def test_checked_int32_rejects_float_items():
    with pytest.raises(KindMismatchError):
        binary_search_sorted_list_int32([-1, 0], [-0.5], checked=True)


def test_checked_int32_rejects_values_out_of_range():
    with pytest.raises(KindMismatchError):
        binary_search_sorted_list_int32([0, 2**40], [1], checked=True)


def test_checked_accepts_lossless_conversion():
    assert binary_search_sorted_list_int32([-1, 0], [-1], checked=True).tolist() == [1]
    assert binary_search_sorted_list_double(np.array([1, 3, 5], dtype=np.int32), [4.5],
                                            checked=True).tolist() == [2.0]


def test_unchecked_int32_truncates_float_items():
    # -0.5 becomes 0, whose predecessor is the second entry
    assert binary_search_sorted_list_int32([-1, 0], [-0.5]).tolist() == [2]
