"""Fit, pan and zoom math for placing content rects inside a viewport.

All functions are pure: inputs are never mutated and a new Rect, Transform
or TranslateSpace is returned. Only transformed_rect validates its inputs;
the rest let inf/nan and inverted rects flow through unchanged.
"""

from __future__ import annotations

import logging

import numpy as np

from ..core.validation import validate_rect, validate_transform
from ..layout.geometry import Rect, TranslateSpace
from .transform import Transform

LOGGER = logging.getLogger(__name__)


def _rect_around(center_x: float, center_y: float, width: float, height: float) -> Rect:
    return Rect(
        center_x - width / 2,
        center_y - height / 2,
        center_x + width / 2,
        center_y + height / 2,
    )


def fit_center_rect(content_aspect_ratio: float, container_rect: Rect) -> Rect:
    """Largest rect of the given aspect ratio that fits centered in container_rect.

    Content relatively wider than the container fills its width; otherwise
    it fills its height. A degenerate container propagates inf/nan rather
    than raising.
    """
    w = np.float64(container_rect.width)
    h = np.float64(container_rect.height)
    with np.errstate(divide="ignore", invalid="ignore"):
        view_aspect_ratio = w / h
        if content_aspect_ratio > view_aspect_ratio:
            h = w / content_aspect_ratio
        else:
            w = h * content_aspect_ratio
    return _rect_around(
        container_rect.center_x, container_rect.center_y, float(w), float(h)
    )


def transformed_rect(rect: Rect, transform: Transform) -> Rect:
    """Apply transform to rect.

    Scaling is anchored on the rect's own center and translation is in
    pre-scale units. With a pivot, the center-anchored result is then shifted
    back by the distance the pivot drifted during the scale, measured
    against the result's center.

    Raises TypeError / ValueError if rect or transform is malformed.
    """
    validate_rect(rect, "rect")
    validate_transform(transform, "transform")

    scale = transform.scale
    result = _rect_around(
        rect.center_x + transform.translate_x * scale,
        rect.center_y + transform.translate_y * scale,
        rect.width * scale,
        rect.height * scale,
    )

    pivot = transform.pivot
    if pivot is None:
        return result

    dx = (scale - 1) * (pivot.x - result.center_x)
    dy = (scale - 1) * (pivot.y - result.center_y)
    LOGGER.debug("Pivot (%s, %s) drift corrected by (%s, %s)", pivot.x, pivot.y, -dx, -dy)
    return result.offset(-dx, -dy)


def get_transform(from_rect: Rect, to_rect: Rect) -> Transform:
    """Transform that maps from_rect onto to_rect's width and center.

    Scale comes from the width ratio only, so rects of differing aspect
    ratio will not round-trip on height.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        scale = np.float64(to_rect.width) / np.float64(from_rect.width)
        translate_x = (to_rect.center_x - from_rect.center_x) / scale
        translate_y = (to_rect.center_y - from_rect.center_y) / scale
    return Transform(float(scale), float(translate_x), float(translate_y))


def _align_axis(
    size: float, low: float, high: float, center: float,
    vp_size: float, vp_low: float, vp_high: float, vp_center: float,
) -> float:
    """Offset along one axis that removes blank space without rescaling."""
    if size > vp_size:
        if low > vp_low:
            return vp_low - low
        if high < vp_high:
            return vp_high - high
        return 0
    return vp_center - center


def aligned_rect(rect: Rect, viewport_rect: Rect) -> Rect:
    """Shift rect so that it leaves no avoidable blank space in the viewport.

    On each axis, a rect larger than the viewport is pulled flush against
    whichever viewport edge it has come away from; a rect that fits is
    centered. No scaling is performed and rect is not mutated.
    """
    dx = _align_axis(
        rect.width, rect.left, rect.right, rect.center_x,
        viewport_rect.width, viewport_rect.left, viewport_rect.right, viewport_rect.center_x,
    )
    dy = _align_axis(
        rect.height, rect.top, rect.bottom, rect.center_y,
        viewport_rect.height, viewport_rect.top, viewport_rect.bottom, viewport_rect.center_y,
    )
    LOGGER.debug("Aligning %s to viewport %s by (%s, %s)", rect, viewport_rect, dx, dy)
    return rect.copy().offset(dx, dy)


def available_translate_space(rect: Rect, viewport_rect: Rect) -> TranslateSpace:
    """Remaining translation per side before rect's edge meets the viewport's."""
    return TranslateSpace(
        left=viewport_rect.left - rect.left,
        right=rect.right - viewport_rect.right,
        top=viewport_rect.top - rect.top,
        bottom=rect.bottom - viewport_rect.bottom,
    )
