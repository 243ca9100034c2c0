"""Tests for fitview.transform.batch."""

import math

import numpy as np
import pytest

from fitview.layout.geometry import Pivot, Rect
from fitview.transform.batch import transformed_rects
from fitview.transform.transform import Transform
from fitview.transform.viewport import transformed_rect


class TestTransformedRects:
    def test_shape_and_dtype(self, edges_array):
        result = transformed_rects(edges_array, Transform(2))
        assert result.shape == (3, 4)
        assert result.dtype == np.float64

    def test_scale_about_center(self):
        result = transformed_rects([[0, 0, 100, 100]], Transform(2))
        np.testing.assert_allclose(result, [[-50, -50, 150, 150]])

    @pytest.mark.parametrize("transform", [
        Transform(1.0),
        Transform(2.0, 10.0, -5.0),
        Transform(0.5, -3.0, 4.0, Pivot(0.0, 0.0)),
        Transform(2.0, 10.0, 0.0, Pivot(100.0, 50.0)),
        Transform(3.0, 0.0, 0.0, Pivot(25.0, 75.0)),
    ])
    def test_matches_scalar_transform(self, edges_array, transform):
        result = transformed_rects(edges_array, transform)
        expected = [
            transformed_rect(Rect.from_array(row), transform).to_tuple()
            for row in edges_array
        ]
        np.testing.assert_allclose(result, expected, atol=1e-9)

    def test_does_not_mutate_input(self, edges_array):
        original = edges_array.copy()
        transformed_rects(edges_array, Transform(2, 1, 1, Pivot(0, 0)))
        np.testing.assert_array_equal(edges_array, original)

    def test_empty_input(self):
        result = transformed_rects(np.empty((0, 4)), Transform(2))
        assert result.shape == (0, 4)

    def test_bad_transform_raises(self, edges_array):
        with pytest.raises(ValueError, match="field 'scale'"):
            transformed_rects(edges_array, Transform(math.nan))

    def test_non_finite_row_raises(self, edges_array):
        edges_array[2, 0] = np.inf
        with pytest.raises(ValueError, match=r"rows: \[2\]"):
            transformed_rects(edges_array, Transform(2))

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError, match="shape"):
            transformed_rects([0, 0, 1, 1], Transform(2))
