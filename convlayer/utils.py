"""
Utility Functions for the Convolution Layer
===========================================

Helper functions for:
- Input validation
- The example input used by the demo program
- Benchmarking
"""

import time

import numpy as np
from tqdm import tqdm

from .errors import DimensionMismatch, InvalidDimension


def example_input():
    """
    The 5x5 signal fed to the layer by the demo program.

    Returns:
        Array, shape (5, 5), dtype float64
    """
    return np.array([
        [0, 1, 2, 4, 5],
        [6, 7, 8, 9, 10],
        [-1, 0, 5, 2, 6],
        [10, 15, 2, 6, 8],
        [34, 3, 2, 5.6, 7],
    ], dtype=np.float64)


def check_size(value, name):
    """Return ``value`` as an int, or raise InvalidDimension if it is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidDimension(f"{name} must be positive, got {value}")
    return int(value)


def as_square_matrix(x, size):
    """
    Convert ``x`` to a float64 ``size x size`` array.

    Always returns a fresh copy, so the caller may keep it without aliasing
    the input.

    Args:
        x: Nested sequence or array
        size: Required side length

    Returns:
        Array, shape (size, size)

    Raises:
        DimensionMismatch: if ``x`` is ragged, non-numeric, not 2-D, not square or the wrong size
    """
    expected = (size, size)

    try:
        raw = np.asarray(x)
    except (TypeError, ValueError) as e:
        raise DimensionMismatch(expected, 'a ragged sequence') from e

    # Strings would otherwise be parsed as numbers by the float conversion
    if raw.dtype.kind not in 'biuf':
        raise DimensionMismatch(expected, f"non-numeric values of dtype {raw.dtype}")

    matrix = np.array(raw, dtype=np.float64)

    if matrix.shape != expected:
        raise DimensionMismatch(expected, matrix.shape)

    return matrix


def benchmark_feed_forward(layer, x, n_runs=100, verbose=False):
    """
    Benchmark feed-forward time.

    Args:
        layer: ConvolutionLayer
        x: Input matrix matching the layer's image size
        n_runs: Number of timed runs
        verbose: Show a progress bar

    Returns:
        Dictionary with timing statistics
    """
    x = as_square_matrix(x, layer.image_size)

    # Warmup
    for _ in range(5):
        layer.feed_forward(x)

    runs = range(n_runs)
    if verbose:
        runs = tqdm(runs, desc="Benchmark")

    times = []
    for _ in runs:
        start = time.perf_counter()
        layer.feed_forward(x)
        end = time.perf_counter()
        times.append(end - start)

    times = np.array(times) * 1000  # Convert to ms

    return {
        'mean_ms': np.mean(times),
        'std_ms': np.std(times),
        'min_ms': np.min(times),
        'max_ms': np.max(times),
        'n_runs': n_runs,
    }
