import os
import sys
import csv
import random
import time
import statistics

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from indexed_pq.datastructures import IndexedMinHeap

# ----------------------------
# Helper Functions
# ----------------------------

def generate_unique_keys(size: int):
    """Generate `size` distinct random keys."""
    return random.sample(range(size * 10), size)

def filled_heap(keys):
    heap = IndexedMinHeap(len(keys))
    for k in keys:
        heap.insert(k, k)
    return heap

def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        keys = generate_unique_keys(input_size)
        start = time.perf_counter()
        operation(keys)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

def measure_space_efficiency(operation, input_size: int, iterations: int = 3):
    """Return average memory used by the heap, its slot buffer and its index (bytes)."""
    sizes = []
    for _ in range(iterations):
        keys = generate_unique_keys(input_size)
        heap = operation(keys)
        total_size = sys.getsizeof(heap) + sys.getsizeof(heap._heap._buf)
        total_size += sys.getsizeof(heap._index._table._buf)
        for key, payload in heap:
            total_size += sys.getsizeof(key) + sys.getsizeof(payload)
        sizes.append(total_size)
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(keys):
    return filled_heap(keys)

def bench_delete_min(keys):
    heap = filled_heap(keys)
    while len(heap) > 0:
        heap.delete_min()
    return heap

def bench_remove(keys):
    heap = filled_heap(keys)
    for k in keys[: len(keys) // 2]:
        heap.remove(k)
    return heap

def bench_decrease_key(keys):
    heap = filled_heap(keys)
    # Keys are < size * 10, so shifting down by size * 10 never collides.
    shift = len(keys) * 10
    for k in keys:
        heap.decrease_key(k, shift)
    return heap

def bench_get(keys):
    heap = filled_heap(keys)
    for k in keys:
        _ = heap.get(k)
    return heap

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100):
    """Run exponential performance tests for IndexedMinHeap operations."""
    operations = {
        "insert": bench_insert,
        "delete_min": bench_delete_min,
        "remove": bench_remove,
        "decrease_key": bench_decrease_key,
        "get": bench_get,
    }

    input_sizes = [base_input * (2 ** i) for i in range(10)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Space (bytes)"
        ])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size)
                avg_space = measure_space_efficiency(op_func, size)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                print(f"{op_name:<12} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    OUTPUT_CSV = "indexed_heap_performance.csv"
    run_benchmarks(OUTPUT_CSV, base_input=100)
