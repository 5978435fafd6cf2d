import numpy as np
import pytest

from sorted_list_search.data_loader import (
    generate_sorted_values, generate_queries, extend_data_with_kde, DISTRIBUTIONS,
)


@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
@pytest.mark.parametrize("kind, dtype", [("float64", np.float64), ("int32", np.int32)])
def test_generated_values_are_sorted(distribution, kind, dtype):
    values = generate_sorted_values(2000, kind=kind, distribution=distribution, seed=0)
    assert values.dtype == dtype
    assert len(values) == 2000
    assert np.all(values[1:] >= values[:-1])


def test_generation_is_reproducible():
    a = generate_sorted_values(500, distribution="clustered", seed=42)
    b = generate_sorted_values(500, distribution="clustered", seed=42)
    assert np.array_equal(a, b)


def test_extend_data_with_kde():
    sample = np.random.default_rng(0).normal(size=50)
    extended = extend_data_with_kde(sample, 200, seed=1)
    assert len(extended) == 200
    assert np.array_equal(extended[:50], sample)
    assert len(extend_data_with_kde(sample, 10)) == 50


def test_unknown_options():
    with pytest.raises(ValueError):
        generate_sorted_values(10, kind="int8")
    with pytest.raises(ValueError):
        generate_sorted_values(10, distribution="zipf")
    with pytest.raises(ValueError):
        generate_sorted_values(0)


def test_generate_queries():
    values = generate_sorted_values(1000, kind="int32", seed=3)
    queries = generate_queries(values, 300, seed=4)
    assert queries.dtype == np.int32
    assert len(queries) == 300
    assert np.all(queries[1:] >= queries[:-1])

    unsorted = generate_queries(values, 300, sort=False, seed=4)
    assert sorted(unsorted.tolist()) == queries.tolist()

    with pytest.raises(ValueError):
        generate_queries(values, 0)
