import time
import argparse
import numpy as np
from tabulate import tabulate
from tqdm import tqdm

from sorted_list_search.searches import predecessor_search, batch_predecessor_search, search_full_scan
from sorted_list_search.checked import checked_batch_predecessor_search
from sorted_list_search.boundary import binary_search_sorted_list
from sorted_list_search.data_loader import generate_sorted_values, generate_queries, DISTRIBUTIONS, KINDS

# Full scan is O(n) per query; skip it for anything larger
FULL_SCAN_MAX_SIZE = 20_000


def reference_locations(values: np.ndarray, queries: np.ndarray) -> np.ndarray:
    """Predecessor indices via numpy, with below-range queries mapped to 0."""
    return np.maximum(np.searchsorted(values, queries, side="right") - 1, 0)


def run_benchmark(dataset_size: int, num_queries: int = 1000, num_runs: int = 5, kind: str = "float64",
                  distribution: str = "uniform", seed=None, sort_queries: bool = True,
                  trace: bool = False, show_progress: bool = True) -> dict:
    """
    Generates a sorted list, runs every search method over fresh queries for
    'num_runs' runs, and prints the averaged timings and agreement rates.
    Returns the raw per-method results.
    """
    print("--- Predecessor Search Benchmark ---")

    rng = np.random.default_rng(seed)

    print(f"\n1. Generating {dataset_size} sorted {kind} values ({distribution})...")
    values = generate_sorted_values(dataset_size, kind=kind, distribution=distribution, seed=rng)

    if trace:
        print("\n2. Tracing one small batch...")
        demo_queries = generate_queries(values, 3, sort=True, seed=rng)
        locations = binary_search_sorted_list(values, demo_queries, checked=True, trace=print)
        print(f"1-based locations: {locations.tolist()}")

    methods = {
        "Per-query Search": lambda q: [predecessor_search(values, x) for x in q],
        "Batch Search": lambda q: batch_predecessor_search(values, q),
        "Checked Batch Search": lambda q: checked_batch_predecessor_search(values, q),
    }
    if dataset_size <= FULL_SCAN_MAX_SIZE:
        methods["Full Scan"] = lambda q: [search_full_scan(values, x) for x in q]
    else:
        print(f"Skipping Full Scan for {dataset_size} values (limit {FULL_SCAN_MAX_SIZE}).")

    all_results = {name: {'times': [], 'agreement': []} for name in methods}
    all_results["numpy searchsorted"] = {'times': [], 'agreement': []}

    print(f"\n--- Running Benchmarks over {num_runs} runs of {num_queries} queries ---")

    run_iterator = range(num_runs)
    if show_progress:
        run_iterator = tqdm(run_iterator, desc="Benchmark", unit="run")

    for _ in run_iterator:
        queries = generate_queries(values, num_queries, sort=sort_queries, seed=rng)

        start_time = time.perf_counter()
        expected = reference_locations(values, queries)
        end_time = time.perf_counter()
        all_results["numpy searchsorted"]['times'].append((end_time - start_time) * 1e3)
        all_results["numpy searchsorted"]['agreement'].append(1.0)

        for name, method in methods.items():
            start_time = time.perf_counter()
            found = method(queries)
            end_time = time.perf_counter()
            all_results[name]['times'].append((end_time - start_time) * 1e3)
            all_results[name]['agreement'].append(np.mean(np.asarray(found) == expected))

    print("\n\n--- Final Averaged Benchmark Results ---")

    headers = ["Search Method", "Avg Time (ms)", "Agreement"]
    table_data = []
    for name, data in all_results.items():
        avg_time = np.mean(data['times']) if data['times'] else 0
        agreement = np.mean(data['agreement']) * 100 if data['agreement'] else 0
        table_data.append([name, f"{avg_time:.3f}", f"{agreement:.1f}%"])

    print(tabulate(table_data, headers=headers, tablefmt="grid"))

    if not sort_queries:
        print("\nQueries were unsorted: the batch search assumes non-decreasing queries, "
              "so its agreement may drop below 100%.")
    print("-" * 80)

    return all_results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark predecessor search over a synthetic sorted list.")
    parser.add_argument("--dataset-size", type=int, default=100_000, help="Number of sorted values.")
    parser.add_argument("--num-queries", type=int, default=1000, help="Search items per run.")
    parser.add_argument("--num-runs", type=int, default=5, help="Number of runs to average over.")
    parser.add_argument("--kind", choices=list(KINDS), default="float64")
    parser.add_argument("--distribution", choices=list(DISTRIBUTIONS), default="uniform")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--unsorted-queries", action="store_true",
                        help="Leave queries in random order (the batch search may then disagree).")
    parser.add_argument("--trace", action="store_true", help="Print the search trace for one small batch.")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar.")
    args = parser.parse_args()

    if args.dataset_size < 1 or args.num_queries < 1 or args.num_runs < 1:
        parser.error("--dataset-size, --num-queries and --num-runs must be positive.")

    run_benchmark(args.dataset_size, num_queries=args.num_queries, num_runs=args.num_runs, kind=args.kind,
                  distribution=args.distribution, seed=args.seed, sort_queries=not args.unsorted_queries,
                  trace=args.trace, show_progress=not args.no_progress)
