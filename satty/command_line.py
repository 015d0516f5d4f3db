"""Command-line options."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, StrEnum

VERSION = "0.16.0"


class Tools(StrEnum):
    """Annotation tools selectable on startup."""

    POINTER = "pointer"
    CROP = "crop"
    LINE = "line"
    ARROW = "arrow"
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    TEXT = "text"
    MARKER = "marker"
    BLUR = "blur"
    HIGHLIGHT = "highlight"
    BRUSH = "brush"


class Action(StrEnum):
    """Action performed when pressing Enter."""

    SAVE_TO_CLIPBOARD = "save-to-clipboard"
    SAVE_TO_FILE = "save-to-file"


class Highlighters(StrEnum):
    """Highlighter variants."""

    BLOCK = "block"
    FREEHAND = "freehand"


@dataclass(frozen=True)
class CommandLine:
    """Parsed command-line options; ``None`` and ``False`` mean "not given"."""

    filename: str
    config: str | None = None
    fullscreen: bool = False
    output_filename: str | None = None
    early_exit: bool = False
    corner_roundness: float | None = None
    initial_tool: Tools | None = None
    copy_command: str | None = None
    annotation_size_factor: float | None = None
    action_on_enter: Action | None = None
    save_after_copy: bool = False
    right_click_copy: bool = False
    default_hide_toolbars: bool = False
    font_family: str | None = None
    font_style: str | None = None
    primary_highlighter: Highlighters | None = None
    disable_notifications: bool = False


def _enum_type(enum_cls: type[Enum]) -> Callable[[str], Enum]:
    def convert(text: str) -> Enum:
        try:
            return enum_cls(text)
        except ValueError:
            choices = ", ".join(member.value for member in enum_cls)
            raise argparse.ArgumentTypeError(
                f"invalid value '{text}' [possible values: {choices}]"
            ) from None

    convert.__name__ = enum_cls.__name__
    return convert


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="satty",
        description="Modern Screenshot Annotation.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"satty {VERSION}")
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the config file. Otherwise will be read from XDG_CONFIG_DIR/satty/config.toml",
    )
    parser.add_argument(
        "-f", "--filename", required=True, help="Path to input image or '-' to read from stdin"
    )
    parser.add_argument("--fullscreen", action="store_true", help="Start in fullscreen mode")
    parser.add_argument(
        "-o",
        "--output-filename",
        help="Filename to use for saving action; may contain strftime format specifiers",
    )
    parser.add_argument(
        "--early-exit", action="store_true", help="Exit directly after copy/save action"
    )
    parser.add_argument(
        "--corner-roundness",
        type=float,
        help="Draw corners of rectangles round if the value is greater than 0 (defaults to 12)",
    )
    parser.add_argument(
        "--initial-tool",
        "--init-tool",
        dest="initial_tool",
        metavar="TOOL",
        type=_enum_type(Tools),
        help="Select the tool on startup",
    )
    parser.add_argument(
        "--copy-command", help="Command to be called on copy, for example `wl-copy`"
    )
    parser.add_argument(
        "--annotation-size-factor",
        type=float,
        help="Increase or decrease the size of the annotations",
    )
    parser.add_argument(
        "--action-on-enter", type=_enum_type(Action), help="Action to perform when pressing Enter"
    )
    parser.add_argument(
        "--save-after-copy",
        action="store_true",
        help="After copying the screenshot, save it to a file as well",
    )
    parser.add_argument("--right-click-copy", action="store_true", help="Right click to copy")
    parser.add_argument(
        "-d", "--default-hide-toolbars", action="store_true", help="Hide toolbars by default"
    )
    parser.add_argument("--font-family", help="Font family to use for text annotations")
    parser.add_argument("--font-style", help="Font style to use for text annotations")
    parser.add_argument(
        "--primary-highlighter",
        type=_enum_type(Highlighters),
        help="The primary highlighter to use, secondary is accessible with CTRL",
    )
    parser.add_argument(
        "--disable-notifications", action="store_true", help="Disable notifications"
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> CommandLine:
    """Parse ``argv`` (or ``sys.argv``); exits with status 2 on invalid input."""
    namespace = build_parser().parse_args(argv)
    return CommandLine(**vars(namespace))