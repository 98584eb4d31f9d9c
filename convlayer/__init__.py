"""
Convolution Layer from Scratch
==============================

A single 2D convolution layer implemented with NumPy:
- Cross-correlation with 'same' (zero-padded) or 'valid' padding
- Scalar bias and ReLU activation
- Pluggable, deterministic kernel initializers
- Console report and matplotlib plots of image, kernel and feature map
"""

from .activations import ReLU, get_activation
from .errors import ConvLayerError, InvalidDimension, DimensionMismatch
from .initializers import (REFERENCE_KERNEL, fractional, zeros, constant, from_matrix,
                           get_initializer, build_kernel)
from .layers import ConvolutionLayer
from .display import format_matrix, format_layer, print_layer
from .utils import example_input, as_square_matrix, benchmark_feed_forward
from . import visualizations

__version__ = "1.0.0"
__all__ = [
    # Activations
    'ReLU', 'get_activation',
    # Errors
    'ConvLayerError', 'InvalidDimension', 'DimensionMismatch',
    # Initializers
    'REFERENCE_KERNEL', 'fractional', 'zeros', 'constant', 'from_matrix',
    'get_initializer', 'build_kernel',
    # Layer
    'ConvolutionLayer',
    # Display
    'format_matrix', 'format_layer', 'print_layer',
    # Utilities
    'example_input', 'as_square_matrix', 'benchmark_feed_forward',
]
