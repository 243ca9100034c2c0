"""fitview: rectangle geometry and scale/translate transforms for fitting, panning and zooming content in a viewport."""

from ._version import __version__
from .layout.geometry import Rect, Pivot, TranslateSpace
from .transform.transform import Transform
from .transform.viewport import (
    fit_center_rect,
    transformed_rect,
    get_transform,
    aligned_rect,
    available_translate_space,
)
from .transform.batch import transformed_rects

__all__ = [
    "__version__",
    "Rect",
    "Pivot",
    "TranslateSpace",
    "Transform",
    "fit_center_rect",
    "transformed_rect",
    "get_transform",
    "aligned_rect",
    "available_translate_space",
    "transformed_rects",
]
