"""
PyTorch Convolution Layer
=========================

The same single-channel layer built on torch.nn.functional.conv2d, for
comparison with the from-scratch NumPy version.

conv2d is a cross-correlation, so kernels are used as-is, without flipping.
"""

import numpy as np
import torch
import torch.nn as nn
import torch.nn.functional as F

from convlayer.errors import InvalidDimension
from convlayer.initializers import build_kernel, from_matrix
from convlayer.utils import as_square_matrix, check_size


class ConvolutionLayerTorch(nn.Module):
    """
    PyTorch convolution layer with the same behaviour as ConvolutionLayer.

    Example:
        >>> model = ConvolutionLayerTorch(image_size=5, kernel_size=3)
        >>> x = torch.ones(5, 5, dtype=torch.float64)
        >>> print(model(x).shape)  # torch.Size([5, 5])
    """

    def __init__(self, image_size, kernel_size, padding='same', bias=0.1,
                 kernel_init='fractional'):
        """
        Initialize the layer.

        Args:
            image_size: Side length of the square input image
            kernel_size: Side length of the square kernel
            padding: 'same' or 'valid'
            bias: Scalar bias
            kernel_init: Initializer name or callable (row, col) -> float
        """
        super().__init__()

        image_size = check_size(image_size, 'image_size')
        kernel_size = check_size(kernel_size, 'kernel_size')

        if padding not in ('same', 'valid'):
            raise ValueError(f"Unknown padding mode '{padding}'. Available: same, valid")
        if padding == 'valid' and kernel_size > image_size:
            raise InvalidDimension(
                f"Valid padding needs kernel_size <= image_size, "
                f"got kernel_size={kernel_size}, image_size={image_size}")

        self.image_size = image_size
        self.kernel_size = kernel_size
        self.padding_mode = padding
        self.padding = kernel_size // 2 if padding == 'same' else 0

        kernel = np.array(build_kernel(kernel_size, kernel_init))

        # Buffers, not parameters: the layer is never trained
        self.register_buffer('weight', torch.from_numpy(kernel).reshape(1, 1, kernel_size, kernel_size))
        self.register_buffer('bias', torch.tensor([float(bias)], dtype=torch.float64))

    @classmethod
    def from_layer(cls, layer):
        """Build a PyTorch layer with the kernel and bias of a NumPy ConvolutionLayer."""
        return cls(layer.image_size, layer.kernel_size,
                   padding=layer.padding_mode,
                   bias=layer.bias,
                   kernel_init=from_matrix(layer.kernel))

    def forward(self, x):
        """Forward pass: (H, W) -> (H_out, W_out)."""
        x = x.reshape(1, 1, *x.shape)
        out = F.conv2d(x, self.weight, self.bias, padding=self.padding)

        # Even kernels with 'same' padding yield one extra row and column
        if self.padding_mode == 'same':
            out = out[..., :self.image_size, :self.image_size]

        return F.relu(out)[0, 0]

    def feed_forward(self, x):
        """NumPy in, NumPy out, mirroring ConvolutionLayer.feed_forward."""
        x = torch.from_numpy(as_square_matrix(x, self.image_size))
        with torch.no_grad():
            return self.forward(x).numpy()
