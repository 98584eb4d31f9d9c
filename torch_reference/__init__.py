"""
PyTorch Convolution Layer
=========================

Convolution layer implemented with PyTorch.
This serves as a comparison to the from-scratch NumPy implementation.
"""

from .conv_torch import ConvolutionLayerTorch

__all__ = ['ConvolutionLayerTorch']
