"""
Kernel Initializers
===================

A kernel initializer is any callable ``init(row, col) -> float``. The layer
calls it once per kernel cell at construction time, so the same initializer
always produces the same kernel.

Initializers implemented:
- fractional: (row + 1) * (col + 1) / 10, the default
- zeros: every weight is 0
- constant(value): every weight is ``value``
- from_matrix(matrix): weights read from a fixed matrix
"""

import numpy as np

from .errors import InvalidDimension


# The 3x3 filter used by the example program
REFERENCE_KERNEL = (
    (0.4, 0.6, 0.7),
    (0.5, 0.6, 0.5),
    (0.6, 0.2, 0.4),
)


def fractional(row, col):
    """Small positive ramp: (row + 1) * (col + 1) / 10."""
    return (row + 1) * (col + 1) / 10


def zeros(row, col):
    return 0.0


def constant(value):
    """Initializer that returns ``value`` for every cell."""
    value = float(value)

    def init(row, col):
        return value

    return init


def from_matrix(matrix):
    """
    Initializer that copies weights from a fixed square matrix.

    The matrix size is attached as ``init.size`` so ``build_kernel`` can reject
    a layer whose kernel size does not match it.

    Args:
        matrix: Square nested sequence or 2-D array

    Returns:
        Initializer callable
    """
    weights = np.array(matrix, dtype=np.float64)
    if weights.ndim != 2 or weights.shape[0] != weights.shape[1]:
        raise InvalidDimension(f"Kernel matrix must be square, got shape {weights.shape}")

    def init(row, col):
        return weights[row, col]

    init.size = weights.shape[0]
    return init


# ====================================
# Initializer Registry
# ====================================

INITIALIZERS = {
    'fractional': fractional,
    'zeros': zeros,
}


def get_initializer(init):
    """
    Resolve an initializer by name, or pass a callable through.

    Example:
        >>> get_initializer('fractional')(1, 2)
        0.6
    """
    if callable(init):
        return init

    name_lower = init.lower().replace('-', '_')
    if name_lower not in INITIALIZERS:
        available = ', '.join(INITIALIZERS.keys())
        raise ValueError(f"Unknown kernel initializer '{init}'. Available: {available}")

    return INITIALIZERS[name_lower]


def build_kernel(size, init='fractional'):
    """
    Build a read-only ``size x size`` kernel.

    Args:
        size: Kernel side length
        init: Initializer name or callable (row, col) -> float

    Returns:
        Kernel array, shape (size, size), dtype float64
    """
    init = get_initializer(init)

    expected = getattr(init, 'size', None)
    if expected is not None and expected != size:
        raise InvalidDimension(
            f"Kernel initializer holds a {expected}x{expected} matrix, "
            f"layer needs {size}x{size}")

    kernel = np.empty((size, size), dtype=np.float64)
    for row in range(size):
        for col in range(size):
            kernel[row, col] = init(row, col)

    kernel.flags.writeable = False
    return kernel
