import numpy as np
from scipy.stats import gaussian_kde

DISTRIBUTIONS = ("uniform", "clustered", "kde")
KINDS = {"float64": np.float64, "int32": np.int32}

# Range the synthetic values are drawn from (fits comfortably in int32)
VALUE_MAX = 1_000_000


def _clustered_sample(rng: np.random.Generator, size: int, num_clusters: int = 8) -> np.ndarray:
    """Draws 'size' points around a handful of randomly placed gaussian clusters."""
    centers = rng.uniform(0, VALUE_MAX, size=num_clusters)
    widths = rng.uniform(VALUE_MAX / 200, VALUE_MAX / 20, size=num_clusters)
    which = rng.integers(0, num_clusters, size=size)
    return rng.normal(centers[which], widths[which])


def extend_data_with_kde(sample: np.ndarray, target_size: int, seed=None) -> np.ndarray:
    """
    Extends the sample to a target size using Kernel Density Estimation.
    """
    sample = np.asarray(sample, dtype=np.float64)
    if len(sample) >= target_size:
        return sample

    # Fit KDE model
    kde = gaussian_kde(sample)

    # Generate new samples
    num_new_points = target_size - len(sample)
    new_samples = kde.resample(size=num_new_points, seed=seed)[0]

    return np.concatenate([sample, new_samples])


def generate_sorted_values(size: int, kind: str = "float64", distribution: str = "uniform",
                           seed=None) -> np.ndarray:
    """
    Generates a sorted array of 'size' values of the given kind.
    Integer kinds are rounded and clipped, so duplicates are expected.
    """
    if kind not in KINDS:
        raise ValueError(f"Unknown kind '{kind}'. Choose from {list(KINDS)}.")
    if distribution not in DISTRIBUTIONS:
        raise ValueError(f"Unknown distribution '{distribution}'. Choose from {list(DISTRIBUTIONS)}.")
    if size < 1:
        raise ValueError("size must be at least 1.")

    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        raw = rng.uniform(0, VALUE_MAX, size=size)
    elif distribution == "clustered":
        raw = _clustered_sample(rng, size)
    else:
        # A small clustered seed sample, grown to the target size with KDE
        seed_size = min(size, 1000)
        raw = extend_data_with_kde(_clustered_sample(rng, seed_size), size, seed=rng)

    dtype = KINDS[kind]
    if dtype is np.int32:
        info = np.iinfo(np.int32)
        raw = np.clip(np.rint(raw), info.min, info.max)

    return np.sort(raw.astype(dtype))


def generate_queries(values: np.ndarray, num_queries: int, sort: bool = True, seed=None) -> np.ndarray:
    """
    Draws 'num_queries' search items of the same kind as 'values'. Items are spread
    slightly beyond both ends of the list so below- and above-range searches occur.
    """
    if num_queries < 1:
        raise ValueError("num_queries must be at least 1.")

    rng = np.random.default_rng(seed)
    low, high = float(values[0]), float(values[-1])
    spread = max((high - low) * 0.01, 1.0)
    queries = rng.uniform(low - spread, high + spread, size=num_queries)

    if np.issubdtype(values.dtype, np.integer):
        info = np.iinfo(values.dtype)
        queries = np.clip(np.rint(queries), info.min, info.max)
    queries = queries.astype(values.dtype)

    if sort:
        queries = np.sort(queries)
    return queries
