"""
Convolution Layer
=================

A single-channel 2D convolution layer: cross-correlate a square image with a
square kernel, add a scalar bias and rectify.

Padding modes:
- 'same': zero-pad by kernel_size // 2 on every side, output keeps the image size
- 'valid': no padding, output side is image_size - kernel_size + 1

The kernel is not flipped, which matches what deep learning libraries call
convolution (torch.nn.functional.conv2d does the same).
"""

import numpy as np

from .activations import get_activation
from .errors import InvalidDimension
from .initializers import build_kernel, from_matrix
from .utils import as_square_matrix, check_size


PADDING_MODES = ('same', 'valid')


def _frozen(array):
    array.flags.writeable = False
    return array


class ConvolutionLayer:
    """
    2D Convolution Layer with fused bias and activation.

    Args:
        image_size: Side length of the square input image
        kernel_size: Side length of the square kernel
        padding: 'same' (default) or 'valid'
        bias: Scalar added to every output position (default: 0.1)
        kernel_init: Initializer name or callable (row, col) -> float
        activation: Activation name or instance (default: 'relu')

    Input shape: (image_size, image_size)
    Output shape: (output_size, output_size)

    Where:
        output_size = image_size                     for 'same'
        output_size = image_size - kernel_size + 1   for 'valid'

    The kernel and bias are fixed after construction. ``image`` and ``output``
    are replaced by new read-only arrays on every successful ``feed_forward``,
    so arrays read after one call are not modified by the next.

    A layer instance holds mutable state and must not be fed from several
    threads at once.

    Example:
        >>> layer = ConvolutionLayer(image_size=5, kernel_size=3)
        >>> feature_map = layer.feed_forward(np.ones((5, 5)))
        >>> feature_map.shape
        (5, 5)
    """

    def __init__(self, image_size, kernel_size, padding='same', bias=0.1,
                 kernel_init='fractional', activation='relu'):
        self.image_size = check_size(image_size, 'image_size')
        self.kernel_size = check_size(kernel_size, 'kernel_size')

        if padding == 'same':
            self.padding = self.kernel_size // 2
            self.output_size = self.image_size
        elif padding == 'valid':
            if self.kernel_size > self.image_size:
                raise InvalidDimension(
                    f"Valid padding needs kernel_size <= image_size, "
                    f"got kernel_size={self.kernel_size}, image_size={self.image_size}")
            self.padding = 0
            self.output_size = self.image_size - self.kernel_size + 1
        else:
            available = ', '.join(PADDING_MODES)
            raise ValueError(f"Unknown padding mode '{padding}'. Available: {available}")
        self.padding_mode = padding

        self._kernel = build_kernel(self.kernel_size, kernel_init)
        self._bias = float(bias)
        self.activation = get_activation(activation)

        self._image = _frozen(np.zeros((self.image_size, self.image_size)))
        self._output = _frozen(np.zeros((self.output_size, self.output_size)))

    @property
    def image(self):
        """Last accepted input (unpadded), read-only."""
        return self._image

    @property
    def kernel(self):
        return self._kernel

    @property
    def bias(self):
        return self._bias

    @property
    def output(self):
        """Feature map from the last feed-forward call, read-only."""
        return self._output

    def _pad_input(self, x):
        """Apply zero padding to input."""
        if self.padding == 0:
            return x

        return np.pad(x, self.padding, mode='constant')

    def _windows(self, x_padded):
        """
        View of every kernel-sized patch of the padded image.

        Uses numpy stride tricks so no patch is copied. For an even kernel in
        'same' mode the padded image holds one extra row and column of
        windows; only the first output_size in each direction are taken.

        Returns:
            Array view, shape (output_size, output_size, kernel_size, kernel_size)
        """
        k = self.kernel_size
        n = self.output_size
        shape = (n, n, k, k)
        strides = (
            x_padded.strides[0],  # output row
            x_padded.strides[1],  # output column
            x_padded.strides[0],  # kernel row
            x_padded.strides[1],  # kernel column
        )
        return np.lib.stride_tricks.as_strided(x_padded, shape=shape, strides=strides,
                                               writeable=False)

    def convolve(self, x):
        """
        Cross-correlate ``x`` with the kernel, without bias or activation.

        raw[i, j] = sum_k sum_l padded[i + k, j + l] * kernel[k, l]

        Args:
            x: Image array, shape (image_size, image_size)

        Returns:
            Raw sums, shape (output_size, output_size)
        """
        windows = self._windows(self._pad_input(x))
        return np.tensordot(windows, self._kernel, axes=((2, 3), (0, 1)))

    def feed_forward(self, x):
        """
        Run the layer on a new image.

        The input is validated before any state changes, so a rejected input
        leaves ``image`` and ``output`` exactly as they were.

        Args:
            x: Square matrix, shape (image_size, image_size)

        Returns:
            Feature map, shape (output_size, output_size)

        Raises:
            DimensionMismatch: if ``x`` is not an image_size x image_size matrix
        """
        image = as_square_matrix(x, self.image_size)

        output = self.activation(self.convolve(image) + self._bias)

        self._image = _frozen(image)
        self._output = _frozen(output)
        return self._output

    def __call__(self, x):
        return self.feed_forward(x)

    def save(self, filepath):
        """
        Save kernel, bias and layer shape to file.

        Args:
            filepath: Path to save file (.npz)
        """
        np.savez(filepath,
                 kernel=self._kernel,
                 bias=np.array(self._bias),
                 image_size=np.array(self.image_size),
                 padding=np.array(self.padding_mode))
        print(f"Layer saved to {filepath}")

    @classmethod
    def load(cls, filepath):
        """
        Build a new layer from a file written by ``save``.

        Args:
            filepath: Path to saved layer (.npz)

        Returns:
            ConvolutionLayer with the saved kernel and bias
        """
        with np.load(filepath) as data:
            kernel = data['kernel']
            layer = cls(int(data['image_size']), kernel.shape[0],
                        padding=str(data['padding']),
                        bias=float(data['bias']),
                        kernel_init=from_matrix(kernel))

        print(f"Layer loaded from {filepath}")
        return layer

    def __repr__(self):
        return (f"ConvolutionLayer(image_size={self.image_size}, "
                f"kernel_size={self.kernel_size}, padding={self.padding_mode!r}, "
                f"bias={self._bias})")
