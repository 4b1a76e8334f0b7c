"""Piecewise-linear curves over normalized particle age.

A ``LinearSpline`` stores ``(t, value)`` control points in insertion order and
evaluates by bracketing the query between the last point at or before it and
the next one. Queries before the first point or after the last return that
endpoint's value unchanged.

The value type is opaque to the spline; interpolation is delegated to the
``lerp`` callable given at construction (scalar ``lerp`` or RGB ``lerp_color``).
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, List, Sequence, Tuple, TypeVar

import pygame

T = TypeVar("T")

RGB = Tuple[float, float, float]


def lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def lerp_color(a: RGB, b: RGB, t: float) -> RGB:
    return (lerp(a[0], b[0], t), lerp(a[1], b[1], t), lerp(a[2], b[2], t))


def to_rgb(value: Any) -> RGB:
    """Coerce a colour value to an RGB float triple in [0, 1].

    Accepts anything ``pygame.Color`` parses from a name or hex string
    (``"#ff8080"``, ``"white"``), a ``pygame.Color`` or a 3/4-sequence of floats
    already in [0, 1] (alpha is discarded; the alpha curve owns opacity).
    """
    if isinstance(value, (str, pygame.Color)):
        r, g, b, _a = pygame.Color(value).normalize()
        return (r, g, b)
    if len(value) not in (3, 4):
        raise ValueError(f"colour needs 3 or 4 components, got {value!r}")
    return (float(value[0]), float(value[1]), float(value[2]))


class LinearSpline(Generic[T]):
    def __init__(self, lerp_fn: Callable[[T, T, float], T], points: Iterable[Tuple[float, T]] = ()):
        self._lerp = lerp_fn
        self._points: List[Tuple[float, T]] = []
        for t, value in points:
            self.add_point(t, value)

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Sequence[Tuple[float, T]]:
        return tuple(self._points)

    def add_point(self, t: float, value: T) -> None:
        """Append a control point. Callers add points in increasing ``t``."""
        self._points.append((float(t), value))

    def get_value_at(self, t: float) -> T:
        points = self._points
        if not points:
            raise ValueError("spline has no control points")
        p1 = 0
        for i, (pt, _) in enumerate(points):
            if pt > t:
                break
            p1 = i
        p2 = min(len(points) - 1, p1 + 1)
        t1, v1 = points[p1]
        if p1 == p2 or t < t1:
            return v1
        t2, v2 = points[p2]
        return self._lerp(v1, v2, (t - t1) / (t2 - t1))


def scalar_spline(points: Iterable[Tuple[float, float]]) -> LinearSpline[float]:
    return LinearSpline(lerp, ((t, float(v)) for t, v in points))


def color_spline(points: Iterable[Tuple[float, Any]]) -> LinearSpline[RGB]:
    return LinearSpline(lerp_color, ((t, to_rgb(v)) for t, v in points))


__all__ = ["LinearSpline", "lerp", "lerp_color", "to_rgb", "scalar_spline", "color_spline", "RGB"]
