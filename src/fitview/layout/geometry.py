"""Geometric primitives for viewport fitting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

import numpy as np


DEFAULT_TOLERANCE = 1e-9


def is_finite_number(value: object) -> bool:
    """True if value is a real, finite number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


@dataclass
class Rect:
    """An axis-aligned rectangle defined by its four edges.

    Edges are stored verbatim: nothing enforces left <= right or
    top <= bottom, so width and height can come out negative.
    ``set`` and ``offset`` mutate in place and return the same instance.
    """

    left: float | None = None
    top: float | None = None
    right: float | None = None
    bottom: float | None = None

    @classmethod
    def from_size(cls, width: float, height: float) -> Rect:
        """Rect anchored at the origin with the given size."""
        return cls(0, 0, width, height)

    @classmethod
    def from_dict(cls, d: dict) -> Rect:
        return cls(d["left"], d["top"], d["right"], d["bottom"])

    @classmethod
    def from_array(cls, edges) -> Rect:
        """Build from a length-4 sequence in (left, top, right, bottom) order."""
        arr = np.asarray(edges, dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(
                f"Expected 4 edges (left, top, right, bottom), got shape {arr.shape}."
            )
        return cls(*(float(v) for v in arr))

    def set(self, left: float, top: float, right: float, bottom: float) -> Rect:
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom
        return self

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height; a zero height yields inf or nan."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self.width) / np.float64(self.height))

    def offset(self, dx: float, dy: float) -> Rect:
        """Translate all four edges in place. Returns self for chaining."""
        self.left += dx
        self.right += dx
        self.top += dy
        self.bottom += dy
        return self

    def copy(self) -> Rect:
        return Rect(self.left, self.top, self.right, self.bottom)

    def equals(self, other: Rect) -> bool:
        """Exact comparison of all four edges. Non-Rects never compare equal."""
        if not isinstance(other, Rect):
            return False
        return (
            self.left == other.left
            and self.top == other.top
            and self.right == other.right
            and self.bottom == other.bottom
        )

    def is_close(self, other: Rect, tol: float = DEFAULT_TOLERANCE) -> bool:
        """Edge-wise comparison with an absolute tolerance."""
        return all(
            math.isclose(a, b, rel_tol=0.0, abs_tol=tol)
            for a, b in zip(self.to_tuple(), other.to_tuple())
        )

    def is_valid(self) -> bool:
        """True if every edge is a finite real number.

        NaN and infinite edges are rejected. Inverted rects are not.
        """
        return all(is_finite_number(v) for v in self.to_tuple())

    def to_tuple(self) -> tuple:
        return (self.left, self.top, self.right, self.bottom)

    def to_array(self) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=np.float64)

    def to_dict(self) -> dict:
        return {
            "left": self.left,
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
        }


@dataclass(frozen=True)
class Pivot:
    """A point in output space held fixed while scaling."""

    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class TranslateSpace:
    """Signed distance each edge of a rect can travel before meeting the viewport.

    Negative values mean the rect already overhangs the viewport on that side.
    """

    left: float
    right: float
    top: float
    bottom: float

    def to_dict(self) -> dict:
        return {
            "left": self.left,
            "right": self.right,
            "top": self.top,
            "bottom": self.bottom,
        }
