"""Input events, keyboard shortcuts and the handling of rendered output."""

from __future__ import annotations

import io
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from PIL import Image

from satty.canvas import ViewTransform
from satty.command_line import Action
from satty.configuration import Configuration
from satty.geometry import Vec2D
from satty.notification import log_result

# Modifier bits as reported by the toolkit.
SHIFT_MASK = 1 << 0
CONTROL_MASK = 1 << 2
ALT_MASK = 1 << 3

# Hardware buttons as numbered by the toolkit.
BUTTON_PRIMARY = 1
BUTTON_MIDDLE = 2
BUTTON_SECONDARY = 3

# Linux evdev key codes used for layout-independent shortcuts.
EVDEV_C = 46
EVDEV_S = 31
EVDEV_T = 20
EVDEV_Y = 21
EVDEV_Z = 44

# Hardware key codes are evdev codes shifted by 8 for X11 compatibility.
_KEYCODE_OFFSET = 8


class MouseButton(Enum):
    """Mouse button that triggered an event."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    MIDDLE = "middle"

    @classmethod
    def from_button_number(cls, value: int) -> MouseButton:
        """Map a toolkit button number; unknown buttons count as primary."""
        return {
            BUTTON_PRIMARY: cls.PRIMARY,
            BUTTON_MIDDLE: cls.MIDDLE,
            BUTTON_SECONDARY: cls.SECONDARY,
        }.get(value, cls.PRIMARY)


class MouseEventType(Enum):
    """Kind of mouse interaction."""

    BEGIN_DRAG = "begin-drag"
    END_DRAG = "end-drag"
    UPDATE_DRAG = "update-drag"
    CLICK = "click"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at a position in widget or image space."""

    type: MouseEventType
    button: MouseButton
    modifier: int
    pos: Vec2D

    def to_image_coordinates(
        self, transform: ViewTransform, dpi_scale_factor: float = 1.0
    ) -> MouseEvent:
        """Return the event with its position mapped into image space.

        Clicks and drag starts carry absolute positions; drag updates and drag
        ends carry offsets relative to the drag start.
        """
        if self.type in (MouseEventType.CLICK, MouseEventType.BEGIN_DRAG):
            pos = transform.abs_canvas_to_image_coordinates(self.pos, dpi_scale_factor)
        else:
            pos = transform.rel_canvas_to_image_coordinates(self.pos, dpi_scale_factor)
        return MouseEvent(self.type, self.button, self.modifier, pos)


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release: key name, hardware key code and modifier bits."""

    key: str
    code: int
    modifier: int = 0

    def is_one_of(self, key: str, evdev_code: int) -> bool:
        """Match by key name or by physical key; the modifier is not considered."""
        return self.key == key or self.code - _KEYCODE_OFFSET == evdev_code


class Shortcut(Enum):
    """Actions the sketch board handles itself before tools see a key."""

    UNDO = "undo"
    REDO = "redo"
    TOGGLE_TOOLBARS = "toggle-toolbars"
    SAVE_TO_FILE = "save-to-file"
    COPY_TO_CLIPBOARD = "copy-to-clipboard"
    QUIT = "quit"
    ENTER = "enter"


_CONTROL_SHORTCUTS = (
    ("z", EVDEV_Z, Shortcut.UNDO),
    ("y", EVDEV_Y, Shortcut.REDO),
    ("t", EVDEV_T, Shortcut.TOGGLE_TOOLBARS),
    ("s", EVDEV_S, Shortcut.SAVE_TO_FILE),
    ("c", EVDEV_C, Shortcut.COPY_TO_CLIPBOARD),
)


def shortcut_for(event: KeyEvent) -> Shortcut | None:
    """The shortcut a key press triggers, or ``None`` if it goes to the active tool."""
    if event.modifier == CONTROL_MASK:
        for key, code, shortcut in _CONTROL_SHORTCUTS:
            if event.is_one_of(key, code):
                return shortcut
    if event.key == "Escape":
        return Shortcut.QUIT
    if event.key in ("Return", "KP_Enter"):
        return Shortcut.ENTER
    return None


class _CopyError(Exception):
    pass


def _system_clipboard(data: bytes) -> None:
    """Put PNG data on the desktop clipboard."""
    for command in (
        ["wl-copy", "--type", "image/png"],
        ["xclip", "-selection", "clipboard", "-t", "image/png"],
    ):
        executable = shutil.which(command[0])
        if executable is None:
            continue
        result = subprocess.run(
            [executable, *command[1:]],
            input=data,
            stdout=subprocess.DEVNULL,
            check=False,
        )
        if result.returncode != 0:
            raise _CopyError(f"Writing to process '{command[0]}' failed.")
        return
    raise _CopyError("Cannot open default display for clipboard.")


def _run_copy_command(data: bytes, command: str) -> None:
    try:
        result = subprocess.run(
            ["sh", "-c", command],
            input=data,
            stdout=subprocess.DEVNULL,
            check=False,
        )
    except OSError as e:
        raise _CopyError(str(e)) from e
    if result.returncode != 0:
        raise _CopyError(f"Writing to process '{command}' failed.")


def _encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@dataclass
class OutputHandler:
    """Saves or copies a rendered image according to the configuration."""

    configuration: Configuration
    notifier: Callable[[str], None] | None = None
    clipboard: Callable[[bytes], None] = field(default=_system_clipboard)
    now: Callable[[], datetime] = field(default=datetime.now)

    def _log(self, msg: str) -> None:
        log_result(msg, not self.configuration.disable_notifications, self.notifier)

    def handle_render_result(self, image: Image.Image, action: Action) -> bool:
        """Perform ``action`` on ``image``; returns whether the application should exit."""
        if action == Action.SAVE_TO_CLIPBOARD:
            self.copy(image)
        else:
            self.save(image)
        return self.configuration.early_exit

    def save(self, image: Image.Image) -> str | None:
        """Write ``image`` as PNG to the configured file; returns the path on success."""
        pattern = self.configuration.output_filename
        if pattern is None:
            print("No Output filename specified!")
            return None

        output_filename = self.now().strftime(pattern)

        if not output_filename.endswith(".png"):
            self._log("The only supported format is png, but the filename does not end in png")
            return None

        try:
            data = _encode_png(image)
        except (OSError, ValueError) as e:
            print(f"Error serializing image: {e}")
            return None

        try:
            with open(output_filename, "wb") as handle:
                handle.write(data)
        except OSError as e:
            self._log(f"Error while saving file: {e}")
            return None

        self._log(f"File saved to '{output_filename}'.")
        return output_filename

    def copy(self, image: Image.Image) -> bool:
        """Copy ``image`` as PNG to the clipboard or the configured command."""
        try:
            data = _encode_png(image)
            command = self.configuration.copy_command
            if command is not None:
                _run_copy_command(data, command)
            else:
                self.clipboard(data)
        except (_CopyError, OSError, ValueError) as e:
            print(f"Error saving {e}")
            return False

        self._log("Copied to clipboard.")
        if self.configuration.save_after_copy:
            self.save(image)
        return True