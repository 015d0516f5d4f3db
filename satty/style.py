"""Annotation colours, sizes and styles."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum


def _float_to_byte(value: float) -> int:
    """Scale a 0..1 component to a byte, truncating and saturating."""
    if math.isnan(value):
        return 0
    return int(min(255.0, max(0.0, value * 255.0)))


@dataclass(frozen=True, order=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour component {name} out of range: {value!r}")

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``."""
        if not text.startswith("#"):
            raise ValueError(f"colour must start with '#': {text!r}")
        digits = text[1:]
        if not all(c in "0123456789abcdefABCDEF" for c in digits):
            raise ValueError(f"invalid hex colour: {text!r}")
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 6:
            digits += "ff"
        if len(digits) != 8:
            raise ValueError(f"invalid hex colour length: {text!r}")
        r, g, b, a = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
        return cls(r, g, b, a)

    @classmethod
    def from_rgba_float(cls, red: float, green: float, blue: float, alpha: float) -> Color:
        return cls(
            _float_to_byte(red),
            _float_to_byte(green),
            _float_to_byte(blue),
            _float_to_byte(alpha),
        )

    @classmethod
    def orange(cls) -> Color:
        return cls(240, 147, 43, 255)

    @classmethod
    def red(cls) -> Color:
        return cls(235, 77, 75, 255)

    @classmethod
    def green(cls) -> Color:
        return cls(106, 176, 76, 255)

    @classmethod
    def blue(cls) -> Color:
        return cls(34, 166, 179, 255)

    @classmethod
    def cove(cls) -> Color:
        return cls(19, 15, 64, 255)

    @classmethod
    def pink(cls) -> Color:
        return cls(200, 37, 184, 255)

    def to_rgba_f64(self) -> tuple[float, float, float, float]:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def to_rgba_u32(self) -> int:
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a


class Size(IntEnum):
    """Annotation size step."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    def _pick(self, small: float, medium: float, large: float) -> float:
        return {Size.SMALL: small, Size.MEDIUM: medium, Size.LARGE: large}[self]

    def to_text_size(self, size_factor: float) -> int:
        return int(self._pick(36.0, 54.0, 96.0) * size_factor)

    def to_line_width(self, size_factor: float) -> float:
        return self._pick(3.0, 5.0, 7.0) * size_factor

    def to_arrow_tail_width(self, size_factor: float) -> float:
        return self._pick(3.0, 10.0, 25.0) * size_factor

    def to_arrow_head_length(self, size_factor: float) -> float:
        return self._pick(15.0, 30.0, 60.0) * size_factor

    def to_blur_factor(self, size_factor: float) -> float:
        return self._pick(10.0, 20.0, 30.0) * size_factor

    def to_highlight_width(self, size_factor: float) -> float:
        return self._pick(15.0, 30.0, 45.0) * size_factor


def default_color(palette: Sequence[Color]) -> Color:
    """The first palette colour, or red if the palette is empty."""
    return palette[0] if palette else Color.red()


@dataclass
class Style:
    """Drawing style of an annotation."""

    color: Color = field(default_factory=Color.red)
    size: Size = Size.MEDIUM
    fill: bool = False
    annotation_size_factor: float = 1.0

    @classmethod
    def default(cls, palette: Sequence[Color], annotation_size_factor: float) -> Style:
        return cls(
            color=default_color(palette),
            size=Size.MEDIUM,
            fill=False,
            annotation_size_factor=annotation_size_factor,
        )