"""
Benchmark suite for hyperint.

Measures the arithmetic kernel, the power module and BigArray operations
and writes the timings as JSON plus a short text summary.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import argparse
import json
import platform
import time
from datetime import datetime

import numpy as np

import hyperint as hi


def _time(func, iterations=1000, samples=5):
    """Mean and standard deviation of seconds per call over ``samples`` runs."""
    timings = []
    for _ in range(samples):
        start = time.perf_counter()
        for _ in range(iterations):
            func()
        timings.append((time.perf_counter() - start) / iterations)
    timings = np.asarray(timings)
    mean = float(timings.mean())
    return {
        "mean_time": mean,
        "std_time": float(timings.std()),
        "iterations": iterations,
        "samples": samples,
        "operations_per_second": 1.0 / mean if mean > 0 else float("inf"),
    }


class HyperintBenchmarks:
    """Run benchmark suites and collect their results."""

    def __init__(self, output_dir="benchmark_results"):
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)
        self.results = {}

    def run_arithmetic_benchmarks(self):
        """Benchmark the checked arithmetic kernel."""
        print("\n=== Arithmetic Benchmarks ===")

        a, b = 2**40 + 12345, 2**12 + 7
        scaled = hi.ArithmeticOptions(precision=10)
        results = {
            "add": _time(lambda: hi.add(a, b)),
            "multiply": _time(lambda: hi.multiply(a, b)),
            "divide_precision_10": _time(lambda: hi.divide(a, b, scaled)),
            "multiply_precision_10": _time(lambda: hi.multiply(a, b, scaled)),
            "overflow_detection": _time(lambda: _expect_error(hi.multiply, 2**52, 2**52)),
            "gcd": _time(lambda: hi.gcd(2**50 * 3**20, 6**25)),
        }

        self.results["arithmetic"] = results
        return results

    def run_power_benchmarks(self):
        """Benchmark exponentiation, roots and towers."""
        print("\n=== Power Benchmarks ===")

        results = {
            "power_3_500": _time(lambda: hi.power(3, 500), iterations=200),
            "sqrt_600_bits": _time(lambda: hi.sqrt(2**600 + 1), iterations=200),
            "nth_root_7": _time(lambda: hi.nth_root(10**150, 7), iterations=200),
            "tetration_2_4": _time(lambda: hi.tetration(2, 4), iterations=200),
            "super_root_2_4": _time(lambda: hi.super_root(65536, 4), iterations=20),
        }

        self.results["power"] = results
        return results

    def run_array_benchmarks(self):
        """Benchmark BigArray operations at several sizes."""
        print("\n=== BigArray Benchmarks ===")

        results = {}
        for size in [100, 1000, 10000]:
            values = [10**30 + i for i in range(size)]

            def build():
                arr = hi.BigArray()
                for v in values:
                    arr.push(v)
                return arr

            arr = hi.BigArray.from_values(values)
            rng = np.random.default_rng(0)
            starts = rng.integers(0, size // 2, 100)

            def queries():
                for s in starts:
                    arr.query_range(int(s), int(s) + size // 2 - 1)

            results[f"push_{size}"] = _time(build, iterations=1, samples=3)
            results[f"from_values_{size}"] = _time(lambda: hi.BigArray.from_values(values), iterations=1, samples=3)
            results[f"query_100_{size}"] = _time(queries, iterations=1, samples=3)
            results[f"fill_{size}"] = _time(lambda: arr.fill(0, size - 1, 5), iterations=100, samples=3)
            results[f"sort_{size}"] = _time(lambda: arr.sort(ascending=False), iterations=1, samples=3)

        self.results["array"] = results
        return results

    def save_results(self):
        """Save all benchmark results."""
        timestamp = datetime.now().isoformat()

        output = {
            "timestamp": timestamp,
            "results": self.results,
            "system_info": {
                "python": platform.python_version(),
                "platform": platform.platform(),
                "numpy": np.__version__,
                "hyperint": hi.__version__,
            },
        }

        filename = os.path.join(self.output_dir, f"benchmarks_{timestamp}.json")
        with open(filename, "w") as f:
            json.dump(output, f, indent=2, default=str)

        print(f"\nResults saved to {filename}")
        self._save_summary()

    def _save_summary(self):
        """Save a human-readable summary."""
        summary_file = os.path.join(self.output_dir, "summary.txt")

        with open(summary_file, "w") as f:
            f.write("hyperint Benchmark Summary\n")
            f.write("=" * 50 + "\n\n")

            if "arithmetic" in self.results:
                f.write("Arithmetic Operations (ops/sec):\n")
                for name, result in self.results["arithmetic"].items():
                    f.write(f"  {name}: {result['operations_per_second']:,.0f}\n")
                f.write("\n")

            for suite in ("power", "array"):
                if suite in self.results:
                    f.write(f"{suite.title()} Operations (ms/op):\n")
                    for name, result in self.results[suite].items():
                        f.write(f"  {name}: {result['mean_time'] * 1000:.3f}\n")
                    f.write("\n")

        print(f"Summary saved to {summary_file}")


def _expect_error(func, *args):
    try:
        func(*args)
    except hi.HyperintError:
        return True
    return False


def main():
    """Run all benchmarks."""
    parser = argparse.ArgumentParser(description="Run hyperint benchmarks")
    parser.add_argument(
        "--output", default="benchmark_results", help="Output directory for results"
    )
    parser.add_argument(
        "--suite",
        nargs="+",
        choices=["arithmetic", "power", "array", "all"],
        default=["all"],
        help="Benchmark suites to run",
    )

    args = parser.parse_args()

    print("hyperint Benchmarks")
    print("===================")

    benchmarks = HyperintBenchmarks(args.output)

    suites = {
        "arithmetic": benchmarks.run_arithmetic_benchmarks,
        "power": benchmarks.run_power_benchmarks,
        "array": benchmarks.run_array_benchmarks,
    }

    if "all" in args.suite:
        to_run = list(suites.values())
    else:
        to_run = [suites[name] for name in args.suite]

    for func in to_run:
        func()

    benchmarks.save_results()


if __name__ == "__main__":
    main()
