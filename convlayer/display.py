"""
Console report for a convolution layer.

Formatting options (output stream, number of decimals) are passed to each
call rather than kept on the layer.
"""

import sys

import numpy as np


RULE = "-" * 78


def format_matrix(data, num_decimals=1, offset=0):
    """
    Format a matrix as fixed-point rows.

    Args:
        data: 2-D array or nested sequence
        num_decimals: Digits after the decimal point
        offset: Number of leading rows and columns to skip

    Returns:
        One line per row, values separated by a space
    """
    data = np.asarray(data, dtype=np.float64)
    lines = []
    for row in data[offset:]:
        lines.append(' '.join(f"{value:.{num_decimals}f}" for value in row[offset:]))
    return '\n'.join(lines)


def format_layer(layer, num_decimals=1, transpose_image=False):
    """
    Build the text report for a layer: sizes, image, kernel, bias and feature map.

    Args:
        layer: ConvolutionLayer
        num_decimals: Digits after the decimal point
        transpose_image: Print the image transposed (columns as rows)

    Returns:
        Report string, ending with a blank line
    """
    image = layer.image.T if transpose_image else layer.image

    lines = [
        RULE,
        f"Image size: {layer.image_size} x {layer.image_size}",
        f"Kernel size: {layer.kernel_size} x {layer.kernel_size}",
        "",
        "Image:",
        format_matrix(image, num_decimals),
        "",
        "Kernel:",
        format_matrix(layer.kernel, num_decimals),
        "",
        f"Kernel bias: {layer.bias:.{num_decimals}f}",
        "",
        "Feature map:",
        format_matrix(layer.output, num_decimals),
        RULE,
        "",
    ]
    return '\n'.join(lines) + '\n'


def print_layer(layer, stream=None, num_decimals=1, transpose_image=False):
    """
    Write the layer report to ``stream`` (default: stdout).

    Read-only: call it between feed-forward calls, never during one.
    """
    if stream is None:
        stream = sys.stdout
    stream.write(format_layer(layer, num_decimals, transpose_image))
