"""Transform: uniform scale plus translation, optionally anchored on a pivot."""

from __future__ import annotations

from dataclasses import dataclass

from ..layout.geometry import Pivot, is_finite_number


@dataclass(frozen=True)
class Transform:
    """Uniform scale + translate mapping applied to a Rect.

    translate_x / translate_y are in source (pre-scale) units: applying the
    transform moves a rect's center by ``translate * scale``. The pivot, when
    given, is a point in output space that stays fixed across the scale.
    """

    scale: float
    translate_x: float = 0.0
    translate_y: float = 0.0
    pivot: Pivot | None = None

    @classmethod
    def identity(cls) -> Transform:
        return cls(scale=1.0)

    @classmethod
    def from_dict(cls, d: dict) -> Transform:
        pivot = d.get("pivot")
        return cls(
            scale=d["scale"],
            translate_x=d.get("translate_x", 0.0),
            translate_y=d.get("translate_y", 0.0),
            pivot=Pivot(pivot["x"], pivot["y"]) if pivot is not None else None,
        )

    def is_valid(self) -> bool:
        """True if scale, translation and pivot (if any) are finite numbers."""
        fields = [self.scale, self.translate_x, self.translate_y]
        if self.pivot is not None:
            if not isinstance(self.pivot, Pivot):
                return False
            fields.extend([self.pivot.x, self.pivot.y])
        return all(is_finite_number(v) for v in fields)

    def to_dict(self) -> dict:
        d = {
            "scale": self.scale,
            "translate_x": self.translate_x,
            "translate_y": self.translate_y,
        }
        if self.pivot is not None:
            d["pivot"] = self.pivot.to_dict()
        return d
