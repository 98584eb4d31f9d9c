"""Demo: run the reference 3x3 kernel over the example 5x5 input and print the result."""

from .display import print_layer
from .initializers import REFERENCE_KERNEL, from_matrix
from .layers import ConvolutionLayer
from .utils import example_input


def main():
    layer = ConvolutionLayer(image_size=5, kernel_size=3,
                             kernel_init=from_matrix(REFERENCE_KERNEL))
    layer.feed_forward(example_input())
    print_layer(layer, transpose_image=True)
    return layer


if __name__ == '__main__':
    main()
