"""Two-dimensional vectors, angles and rectangle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Machine epsilon of a single-precision float; used as the "close to zero" threshold.
FLOAT_EPSILON = 1.1920929e-07

_SNAP_STEP = 0.2617994  # 15 degrees in radians


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class Angle:
    """An angle stored in radians."""

    radians: float = 0.0

    @classmethod
    def from_radians(cls, radians: float) -> Angle:
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(degrees * math.pi / 180.0)

    def cos(self) -> float:
        return math.cos(self.radians)

    def sin(self) -> float:
        return math.sin(self.radians)

    def __mul__(self, factor: float) -> Angle:
        return Angle(self.radians * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Vec2D:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vec2D:
        return cls(0.0, 0.0)

    @classmethod
    def from_angle(cls, angle: Angle) -> Vec2D:
        """Unit vector pointing in the direction of ``angle`` (0 is the positive x-axis)."""
        return cls(angle.cos(), angle.sin())

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y

    def angle(self) -> Angle:
        """Angle of the vector; 0 is the positive x-axis, pi/2 the positive y-axis."""
        return Angle(math.atan2(self.y, self.x))

    def snapped_vector_15deg(self) -> Vec2D:
        """Vector of the same length, rotated to the nearest multiple of 15 degrees."""
        if self.x == 0.0:
            current_angle = math.copysign(math.pi / 2, self.y) if self.y != 0.0 else math.nan
        else:
            current_angle = math.atan(self.y / self.x)
        current_norm2 = self.norm2()
        new_angle = _round_half_away(current_angle / _SNAP_STEP) * _SNAP_STEP

        if abs(new_angle) < math.pi / 4.0:
            b = math.sqrt(current_norm2 / (math.tan(math.pi / 2.0 - new_angle) ** 2 + 1.0))
            a = math.sqrt(max(current_norm2 - b * b, 0.0))
        else:
            a = math.sqrt(current_norm2 / (math.tan(new_angle) ** 2 + 1.0))
            b = math.sqrt(max(current_norm2 - a * a, 0.0))

        sign_x = -1.0 if self.x < 0.0 else 1.0
        sign_y = -1.0 if self.y < 0.0 else 1.0
        return Vec2D(sign_x * a, sign_y * b)

    def is_zero(self) -> bool:
        return abs(self.x) < FLOAT_EPSILON and abs(self.y) < FLOAT_EPSILON

    def __add__(self, other: Vec2D) -> Vec2D:
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        return Vec2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2D:
        return Vec2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"({_format_number(self.x)},{_format_number(self.y)})"


Rect = tuple[Vec2D, Vec2D]


def rect_ensure_positive_size(pos: Vec2D, size: Vec2D) -> Rect:
    """Normalise a rectangle so that both size components are positive."""
    if size.x > 0.0:
        pos_x, size_x = pos.x, size.x
    else:
        pos_x, size_x = pos.x + size.x, abs(size.x)

    if size.y > 0.0:
        pos_y, size_y = pos.y, size.y
    else:
        pos_y, size_y = pos.y + size.y, abs(size.y)

    return Vec2D(pos_x, pos_y), Vec2D(size_x, size_y)


def rect_ensure_in_bounds(rect: Rect, bounds: Rect) -> Rect:
    """Clamp a rectangle to lie within ``bounds`` (given as top-left and bottom-right)."""
    pos, size = rect
    low, high = bounds
    pos_x, pos_y = pos.x, pos.y
    size_x, size_y = size.x, size.y

    # The position is moved onto the bound; the size is reduced by the
    # remaining distance, which is zero once the position has been moved.
    if pos_x < low.x:
        pos_x = low.x
        size_x -= low.x - pos_x
    if pos_y < low.y:
        pos_y = low.y
        size_y -= low.y - pos_y

    if pos_x + size_x > high.x:
        size_x = high.x - pos_x
    if pos_y + size_y > high.y:
        size_y = high.y - pos_y

    return Vec2D(pos_x, pos_y), Vec2D(size_x, size_y)


def rect_round(rect: Rect) -> Rect:
    """Round position and size to whole numbers, halves away from zero."""
    pos, size = rect
    return (
        Vec2D(_round_half_away(pos.x), _round_half_away(pos.y)),
        Vec2D(_round_half_away(size.x), _round_half_away(size.y)),
    )