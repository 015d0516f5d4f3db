"""Application entry point: configuration, image loading and window sizing."""

from __future__ import annotations

import io
import os
import sys
from collections.abc import Sequence
from typing import BinaryIO

from PIL import Image

from satty.configuration import Configuration
from satty.sketch_board import OutputHandler

# Share of the monitor the initial window may occupy at most.
_MONITOR_SHARE = 0.8


def initial_window_size(
    image_width: int,
    image_height: int,
    monitor_width: int | None = None,
    monitor_height: int | None = None,
) -> tuple[int, int]:
    """Default window size: the image size, scaled down to fit 80% of the monitor.

    Without a known monitor size the image size is used unchanged.
    """
    if monitor_width is None or monitor_height is None:
        return image_width, image_height

    reduced_width = monitor_width * _MONITOR_SHARE
    reduced_height = monitor_height * _MONITOR_SHARE
    width = float(image_width)
    height = float(image_height)

    if reduced_width > width and reduced_height > height:
        return image_width, image_height

    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive: {image_width}x{image_height}")
    aspect_ratio = width / height

    new_width = reduced_width
    new_height = new_width / aspect_ratio
    if new_height > reduced_height:
        new_height = reduced_height
        new_width = new_height * aspect_ratio

    return int(new_width), int(new_height)


def load_image(filename: str | os.PathLike[str], stdin: BinaryIO | None = None) -> Image.Image:
    """Load the input image from ``filename``, or from ``stdin`` when it is ``'-'``.

    Raises ``OSError`` if the image cannot be read or decoded.
    """
    if os.fspath(filename) == "-":
        stream = stdin if stdin is not None else sys.stdin.buffer
        data = stream.read()
        try:
            with Image.open(io.BytesIO(data)) as image:
                image.load()
                return image.copy()
        except (OSError, ValueError) as e:
            raise OSError(f"Conversion to image failed: {e}") from e

    try:
        with Image.open(filename) as image:
            image.load()
            return image.copy()
    except (OSError, ValueError) as e:
        raise OSError(f"couldn't load image: {e}") from e


def main(argv: Sequence[str] | None = None) -> int:
    """Load configuration and image, then perform the configured Enter action."""
    configuration = Configuration.load(argv)

    try:
        image = load_image(configuration.input_filename)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    handler = OutputHandler(configuration)
    handler.handle_render_result(image, configuration.action_on_enter)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())