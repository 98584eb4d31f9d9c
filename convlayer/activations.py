"""
Activation Functions
====================

Non-linearities applied to the feature map after the bias has been added.

Only the rectifier is registered: the layer guarantees a non-negative
feature map, so every activation offered here must satisfy f(x) >= 0.
"""

import numpy as np


class Activation:
    """Base class for all activation functions."""

    def forward(self, x):
        """Apply activation function."""
        raise NotImplementedError

    def __call__(self, x):
        return self.forward(x)

    def __repr__(self):
        return f"{type(self).__name__}()"


class ReLU(Activation):
    """
    Rectified Linear Unit: f(x) = max(0, x)

    NaN passes through unchanged (np.maximum propagates it), +inf stays +inf
    and -inf becomes 0.
    """

    def forward(self, x):
        return np.maximum(0.0, x)


# ====================================
# Activation Registry
# ====================================

ACTIVATIONS = {
    'relu': ReLU,
}


def get_activation(name):
    """
    Get activation function by name.

    Args:
        name: String name ('relu') or Activation instance

    Returns:
        Activation instance

    Example:
        >>> act = get_activation('relu')
        >>> act(np.array([-1.0, 0.0, 1.0]))
        array([0., 0., 1.])
    """
    if isinstance(name, Activation):
        return name

    name_lower = name.lower().replace('-', '_')
    if name_lower not in ACTIVATIONS:
        available = ', '.join(ACTIVATIONS.keys())
        raise ValueError(f"Unknown activation '{name}'. Available: {available}")

    return ACTIVATIONS[name_lower]()
