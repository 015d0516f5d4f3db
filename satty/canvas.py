"""Annotation stack, view transformation and pixel-buffer helpers for the drawing area."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from satty.geometry import Rect, Vec2D, rect_ensure_in_bounds, rect_round


class Drawable(ABC):
    """Something that has been drawn onto the image and can be undone."""

    @abstractmethod
    def draw(self, canvas: Any, font: Any) -> None:
        """Render onto ``canvas`` using ``font`` for any text."""

    def handle_undo(self) -> None:
        """Called when the drawable is taken off the stack by an undo."""

    def handle_redo(self) -> None:
        """Called when the drawable is put back on the stack by a redo."""


@dataclass
class DrawableStack:
    """Committed drawables, with an undo/redo history."""

    drawables: list[Drawable] = field(default_factory=list)
    redo_stack: list[Drawable] = field(default_factory=list)

    def commit(self, drawable: Drawable) -> None:
        """Add ``drawable``; this discards anything that could be redone."""
        self.drawables.append(drawable)
        self.redo_stack.clear()

    def undo(self) -> bool:
        """Move the latest drawable to the redo stack; ``False`` if there is none."""
        if not self.drawables:
            return False
        drawable = self.drawables.pop()
        drawable.handle_undo()
        self.redo_stack.append(drawable)
        return True

    def redo(self) -> bool:
        """Restore the latest undone drawable; ``False`` if there is none."""
        if not self.redo_stack:
            return False
        drawable = self.redo_stack.pop()
        drawable.handle_redo()
        self.drawables.append(drawable)
        return True

    def __iter__(self) -> Iterator[Drawable]:
        return iter(self.drawables)

    def __len__(self) -> int:
        return len(self.drawables)


@dataclass
class ViewTransform:
    """Scale and offset that fit the image, centred, into the canvas."""

    scale_factor: float = 1.0
    offset: Vec2D = field(default_factory=Vec2D.zero)

    def update(
        self,
        image_width: float,
        image_height: float,
        canvas_width: float,
        canvas_height: float,
    ) -> None:
        """Recompute scale and offset for the given image and canvas sizes."""
        if image_width <= 0 or image_height <= 0:
            raise ValueError(f"image size must be positive: {image_width}x{image_height}")
        aspect_ratio = image_width / image_height

        if canvas_width / aspect_ratio <= canvas_height:
            self.scale_factor = canvas_width / aspect_ratio / image_height
        else:
            self.scale_factor = canvas_height * aspect_ratio / image_width

        self.offset = Vec2D(
            (canvas_width - image_width * self.scale_factor) / 2.0,
            (canvas_height - image_height * self.scale_factor) / 2.0,
        )

    def abs_canvas_to_image_coordinates(self, point: Vec2D, dpi_scale_factor: float) -> Vec2D:
        """Map an absolute widget position to image coordinates."""
        return Vec2D(
            (point.x * dpi_scale_factor - self.offset.x) / self.scale_factor,
            (point.y * dpi_scale_factor - self.offset.y) / self.scale_factor,
        )

    def rel_canvas_to_image_coordinates(self, point: Vec2D, dpi_scale_factor: float) -> Vec2D:
        """Map a widget-space displacement to an image-space displacement."""
        return Vec2D(
            point.x * dpi_scale_factor / self.scale_factor,
            point.y * dpi_scale_factor / self.scale_factor,
        )


def render_region(crop_rect: Rect | None, image_width: float, image_height: float) -> Rect:
    """Position and size of the area to export: the crop if usable, else the whole image."""
    bounds = (Vec2D.zero(), Vec2D(float(image_width), float(image_height)))
    if crop_rect is None:
        return bounds
    pos, size = rect_round(rect_ensure_in_bounds(crop_rect, bounds))
    if size.is_zero():
        return bounds
    return pos, size


def pack_rows(
    buffer: bytes | bytearray | memoryview,
    width: int,
    height: int,
    stride: int,
    bytes_per_pixel: int,
) -> bytes:
    """Drop the padding after each row of a strided pixel buffer."""
    if width < 0 or height < 0:
        raise ValueError(f"image size must not be negative: {width}x{height}")
    if bytes_per_pixel <= 0:
        raise ValueError(f"bytes per pixel must be positive: {bytes_per_pixel}")
    row_length = width * bytes_per_pixel
    if stride < row_length:
        raise ValueError(f"stride {stride} is shorter than a row of {row_length} bytes")

    data = memoryview(buffer).cast("B")
    total = row_length * height
    needed = (height - 1) * stride + row_length if height else 0
    if len(data) < needed:
        raise ValueError(f"buffer holds {len(data)} bytes, {needed} needed")

    if row_length == stride:
        return bytes(data[:total])
    return b"".join(
        bytes(data[start : start + row_length]) for start in range(0, height * stride, stride)
    )