"""
Exceptions raised by the convolution layer.

Both errors derive from ValueError so callers that already guard layer
configuration with ``except ValueError`` keep working.
"""


class ConvLayerError(ValueError):
    """Base class for convolution layer errors."""


class InvalidDimension(ConvLayerError):
    """Raised when an image or kernel size cannot be used to build a layer."""


class DimensionMismatch(ConvLayerError):
    """Raised when a feed-forward input does not match the layer's image shape."""

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f"Expected input of shape {expected}, got {got}")
