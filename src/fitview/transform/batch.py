"""Vectorised transformed_rect over many rects at once."""

from __future__ import annotations

import numpy as np

from ..core.validation import validate_edges_array, validate_transform
from .transform import Transform


def transformed_rects(edges, transform: Transform) -> np.ndarray:
    """Apply transform to every row of an (N, 4) edges array.

    Rows are (left, top, right, bottom). Semantics match transformed_rect,
    including the pivot drift correction. Returns a new float64 array.
    """
    arr = validate_edges_array(edges, "edges")
    validate_transform(transform, "transform")

    scale = transform.scale
    half_w = (arr[:, 2] - arr[:, 0]) * scale / 2
    half_h = (arr[:, 3] - arr[:, 1]) * scale / 2
    cx = (arr[:, 0] + arr[:, 2]) / 2 + transform.translate_x * scale
    cy = (arr[:, 1] + arr[:, 3]) / 2 + transform.translate_y * scale

    if transform.pivot is not None:
        # The drift is measured against the scaled center, then undone.
        cx = cx - (scale - 1) * (transform.pivot.x - cx)
        cy = cy - (scale - 1) * (transform.pivot.y - cy)

    return np.column_stack([cx - half_w, cy - half_h, cx + half_w, cy + half_h])
