"""
Tests for the console report, the demo program and utilities
=============================================================
"""

import io

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from convlayer.__main__ import main
from convlayer.display import RULE, format_layer, format_matrix, print_layer
from convlayer.errors import DimensionMismatch, InvalidDimension
from convlayer.layers import ConvolutionLayer
from convlayer.utils import as_square_matrix, benchmark_feed_forward, check_size, example_input


class TestFormatMatrix:
    """Tests for matrix formatting."""

    def test_fixed_decimals(self):
        text = format_matrix([[1, 2.25], [-3, 0]], num_decimals=2)

        assert text == "1.00 2.25\n-3.00 0.00"

    def test_offset_skips_leading_rows_and_columns(self):
        text = format_matrix(np.arange(9).reshape(3, 3), num_decimals=0, offset=1)

        assert text == "4 5\n7 8"


class TestFormatLayer:
    """Tests for the layer report."""

    def test_sections(self):
        layer = ConvolutionLayer(4, 3)
        layer.feed_forward(np.ones((4, 4)))
        report = format_layer(layer)
        lines = report.splitlines()

        assert lines[0] == RULE
        assert "Image size: 4 x 4" in lines
        assert "Kernel size: 3 x 3" in lines
        assert "Kernel bias: 0.1" in lines
        for header in ("Image:", "Kernel:", "Feature map:"):
            assert header in lines
        assert lines[-2] == RULE
        assert lines[-1] == ""

    def test_transpose_image(self):
        layer = ConvolutionLayer(2, 1, bias=0.0, kernel_init='fractional')
        layer.feed_forward([[1, 2], [3, 4]])

        plain = format_layer(layer, num_decimals=0).splitlines()
        transposed = format_layer(layer, num_decimals=0, transpose_image=True).splitlines()

        start = plain.index("Image:") + 1
        assert plain[start:start + 2] == ["1 2", "3 4"]
        assert transposed[start:start + 2] == ["1 3", "2 4"]

    def test_print_layer_writes_to_stream(self):
        layer = ConvolutionLayer(3, 3)
        stream = io.StringIO()
        print_layer(layer, stream=stream, num_decimals=3)

        assert stream.getvalue() == format_layer(layer, num_decimals=3)
        assert "Kernel bias: 0.100" in stream.getvalue()

    def test_report_does_not_change_layer(self):
        layer = ConvolutionLayer(3, 3)
        output = layer.feed_forward(np.eye(3))
        format_layer(layer, transpose_image=True)

        assert layer.output is output


class TestMain:
    """Tests for the demo program."""

    def test_main(self, capsys):
        layer = main()
        captured = capsys.readouterr()

        assert "Feature map:" in captured.out
        # The demo prints the image transposed: first row is the first input column
        lines = captured.out.splitlines()
        assert lines[lines.index("Image:") + 1] == "0.0 6.0 -1.0 10.0 34.0"
        assert layer.output[2, 2] == pytest.approx(29.8)


class TestUtils:
    """Tests for utility helpers."""

    def test_example_input(self):
        x = example_input()

        assert x.shape == (5, 5)
        assert x[4, 3] == 5.6

    def test_as_square_matrix_copies(self):
        x = np.ones((3, 3))
        matrix = as_square_matrix(x, 3)
        matrix[0, 0] = 5.0

        assert x[0, 0] == 1.0

    def test_as_square_matrix_rejects(self):
        with pytest.raises(DimensionMismatch):
            as_square_matrix(np.ones((3, 2)), 3)

    def test_as_square_matrix_rejects_numeric_strings(self):
        """Strings are not parsed as numbers."""
        with pytest.raises(DimensionMismatch):
            as_square_matrix([['1', '2'], ['3', '4']], 2)

    def test_as_square_matrix_accepts_ints_and_bools(self):
        matrix = as_square_matrix([[1, 0], [True, False]], 2)

        assert matrix.dtype == np.float64
        np.testing.assert_array_equal(matrix, [[1.0, 0.0], [1.0, 0.0]])

    @pytest.mark.parametrize("value", [0, -1, 2.0, True, "3"])
    def test_check_size_rejects(self, value):
        with pytest.raises(InvalidDimension):
            check_size(value, 'image_size')

    def test_check_size_accepts_numpy_integers(self):
        assert check_size(np.int64(4), 'kernel_size') == 4

    def test_benchmark_feed_forward(self):
        layer = ConvolutionLayer(5, 3)
        results = benchmark_feed_forward(layer, example_input(), n_runs=10)

        assert results['n_runs'] == 10
        assert 'std_ms' in results
        assert results['mean_ms'] > 0
        assert results['min_ms'] <= results['max_ms']


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
