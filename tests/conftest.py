"""Shared test fixtures for fitview."""

import numpy as np
import pytest

from fitview.layout.geometry import Rect


@pytest.fixture
def square():
    """100x100 rect anchored at the origin."""
    return Rect(0, 0, 100, 100)


@pytest.fixture
def viewport():
    """200x100 landscape viewport."""
    return Rect(0, 0, 200, 100)


@pytest.fixture
def edges_array():
    """Three rects as an (N, 4) edges array."""
    return np.array([
        [0.0, 0.0, 100.0, 100.0],
        [10.0, 20.0, 30.0, 60.0],
        [-50.0, -25.0, 50.0, 25.0],
    ])
