"""Precondition checks with clear error messages for geometry inputs."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..layout.geometry import Pivot, Rect, is_finite_number
from ..transform.transform import Transform


def _check_field(arg_name: str, field_name: str, value: Any) -> None:
    if not is_finite_number(value):
        raise ValueError(
            f"Invalid {arg_name}: field '{field_name}' must be a finite number, "
            f"got {value!r}."
        )


def validate_rect(rect: Any, arg_name: str = "rect") -> Rect:
    """Validate that rect is a Rect with four finite edges.

    Returns the validated Rect (unchanged).
    """
    if not isinstance(rect, Rect):
        raise TypeError(
            f"Expected a Rect for '{arg_name}', got {type(rect).__name__}."
        )
    for field_name in ("left", "top", "right", "bottom"):
        _check_field(arg_name, field_name, getattr(rect, field_name))
    return rect


def validate_transform(transform: Any, arg_name: str = "transform") -> Transform:
    """Validate scale, translation and, when present, the pivot of a Transform.

    Returns the validated Transform (unchanged).
    """
    if not isinstance(transform, Transform):
        raise TypeError(
            f"Expected a Transform for '{arg_name}', got {type(transform).__name__}."
        )
    for field_name in ("scale", "translate_x", "translate_y"):
        _check_field(arg_name, field_name, getattr(transform, field_name))
    if transform.pivot is not None:
        if not isinstance(transform.pivot, Pivot):
            raise TypeError(
                f"Expected a Pivot for '{arg_name}.pivot', "
                f"got {type(transform.pivot).__name__}."
            )
        _check_field(arg_name, "pivot.x", transform.pivot.x)
        _check_field(arg_name, "pivot.y", transform.pivot.y)
    return transform


def validate_edges_array(edges: Any, arg_name: str = "edges") -> np.ndarray:
    """Validate an (N, 4) array of (left, top, right, bottom) rows.

    Returns the edges as a float64 array.
    """
    try:
        arr = np.asarray(edges, dtype=np.float64)
    except (TypeError, ValueError):
        raise TypeError(
            f"'{arg_name}' must be numeric array-like of shape (N, 4)."
        ) from None
    if arr.ndim != 2 or arr.shape[1] != 4:
        raise ValueError(
            f"'{arg_name}' must have shape (N, 4), got {arr.shape}."
        )
    bad_rows = np.where(~np.isfinite(arr).all(axis=1))[0]
    if len(bad_rows) > 0:
        raise ValueError(
            f"'{arg_name}' has non-finite edges in rows: {bad_rows.tolist()[:5]}"
            + (f" (and {len(bad_rows) - 5} more)" if len(bad_rows) > 5 else "")
        )
    return arr
