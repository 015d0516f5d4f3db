"""Application configuration merged from the config file and the command line."""

from __future__ import annotations

import os
import sys
import tomllib
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any

from satty.command_line import Action, CommandLine, Highlighters, Tools, parse_args
from satty.style import Color

_APP_PREFIX = "satty"
_CONFIG_FILE_NAME = "config.toml"
_EXIT_CONFIG_ERROR = 3


class ConfigurationError(Exception):
    """The configuration file could not be located, read or decoded."""


@dataclass
class FontConfiguration:
    """Font used for text annotations; ``None`` means the built-in default."""

    family: str | None = None
    style: str | None = None

    def _merge(self, file_font: _FontSection) -> None:
        if file_font.family is not None:
            self.family = file_font.family
        if file_font.style is not None:
            self.style = file_font.style


def _default_palette() -> list[Color]:
    return [Color.orange(), Color.red(), Color.green(), Color.blue(), Color.cove()]


@dataclass
class ColorPalette:
    """Colours offered in the style toolbar."""

    palette: list[Color] = field(default_factory=_default_palette)
    custom: list[Color] = field(default_factory=list)

    def _merge(self, file_palette: _PaletteSection) -> None:
        if file_palette.palette is not None:
            self.palette = list(file_palette.palette)
        if file_palette.custom is not None:
            self.custom = list(file_palette.custom)


@dataclass(frozen=True)
class _GeneralSection:
    fullscreen: bool | None = None
    early_exit: bool | None = None
    corner_roundness: float | None = None
    initial_tool: Tools | None = None
    copy_command: str | None = None
    annotation_size_factor: float | None = None
    output_filename: str | None = None
    action_on_enter: Action | None = None
    save_after_copy: bool | None = None
    right_click_copy: bool | None = None
    default_hide_toolbars: bool | None = None
    primary_highlighter: Highlighters | None = None
    disable_notifications: bool | None = None


@dataclass(frozen=True)
class _FontSection:
    family: str | None = None
    style: str | None = None


@dataclass(frozen=True)
class _PaletteSection:
    palette: tuple[Color, ...] | None = None
    custom: tuple[Color, ...] | None = None


@dataclass(frozen=True)
class ConfigurationFile:
    """Contents of a configuration file; absent sections are ``None``."""

    general: _GeneralSection | None = None
    color_palette: _PaletteSection | None = None
    font: _FontSection | None = None


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"Decoding toml failed: '{key}' must be a boolean")
    return value


def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"Decoding toml failed: '{key}' must be a number")
    return float(value)


def _as_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"Decoding toml failed: '{key}' must be a string")
    return value


def _as_enum(enum_cls: type[Enum]) -> Callable[[str, Any], Enum]:
    def convert(key: str, value: Any) -> Enum:
        choices = ", ".join(f"'{member.value}'" for member in enum_cls)
        if not isinstance(value, str):
            raise ConfigurationError(f"Decoding toml failed: '{key}' must be one of {choices}")
        try:
            return enum_cls(value)
        except ValueError:
            raise ConfigurationError(
                f"Decoding toml failed: unknown variant '{value}' for '{key}', "
                f"expected one of {choices}"
            ) from None

    return convert


def _as_colors(key: str, value: Any) -> tuple[Color, ...]:
    if not isinstance(value, list):
        raise ConfigurationError(f"Decoding toml failed: '{key}' must be an array")
    colors = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError(f"Decoding toml failed: '{key}' entries must be strings")
        try:
            colors.append(Color.from_hex(item))
        except ValueError as e:
            raise ConfigurationError(f"Decoding toml failed: {e}") from None
    return tuple(colors)


_GENERAL_CONVERTERS: dict[str, Callable[[str, Any], Any]] = {
    "fullscreen": _as_bool,
    "early-exit": _as_bool,
    "corner-roundness": _as_float,
    "initial-tool": _as_enum(Tools),
    "copy-command": _as_str,
    "annotation-size-factor": _as_float,
    "output-filename": _as_str,
    "action-on-enter": _as_enum(Action),
    "save-after-copy": _as_bool,
    "right-click-copy": _as_bool,
    "default-hide-toolbars": _as_bool,
    "primary-highlighter": _as_enum(Highlighters),
    "disable-notifications": _as_bool,
}

_FONT_CONVERTERS: dict[str, Callable[[str, Any], Any]] = {
    "family": _as_str,
    "style": _as_str,
}

_PALETTE_CONVERTERS: dict[str, Callable[[str, Any], Any]] = {
    "palette": _as_colors,
    "custom": _as_colors,
}


def _parse_table(
    name: str,
    table: Any,
    converters: Mapping[str, Callable[[str, Any], Any]],
) -> dict[str, Any]:
    if not isinstance(table, dict):
        raise ConfigurationError(f"Decoding toml failed: '{name}' must be a table")
    expected = ", ".join(f"`{key}`" for key in converters)
    values: dict[str, Any] = {}
    for key, value in table.items():
        try:
            converter = converters[key]
        except KeyError:
            raise ConfigurationError(
                f"Decoding toml failed: unknown field `{key}`, expected one of {expected}"
            ) from None
        values[key.replace("-", "_")] = converter(key, value)
    return values


def parse_configuration_file(text: str) -> ConfigurationFile:
    """Decode the TOML text of a configuration file, rejecting unknown keys."""
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Decoding toml failed: {e}") from e

    sections = {
        "general": (_GENERAL_CONVERTERS, _GeneralSection),
        "color-palette": (_PALETTE_CONVERTERS, _PaletteSection),
        "font": (_FONT_CONVERTERS, _FontSection),
    }
    parsed: dict[str, Any] = {}
    for name, table in document.items():
        if name not in sections:
            expected = ", ".join(f"`{key}`" for key in sections)
            raise ConfigurationError(
                f"Decoding toml failed: unknown field `{name}`, expected one of {expected}"
            )
        converters, section_cls = sections[name]
        parsed[name.replace("-", "_")] = section_cls(**_parse_table(name, table, converters))
    return ConfigurationFile(**parsed)


def read_configuration_file(path: str | os.PathLike[str]) -> ConfigurationFile:
    """Read and decode the configuration file at ``path``."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Error reading file: {e}") from e
    return parse_configuration_file(content)


def default_config_path() -> Path:
    """Location of the configuration file inside the XDG config directory."""
    config_home = os.environ.get("XDG_CONFIG_HOME", "")
    if config_home and os.path.isabs(config_home):
        base = Path(config_home)
    else:
        try:
            base = Path.home() / ".config"
        except RuntimeError as e:
            raise ConfigurationError(f"XDG context error: {e}") from e
    return base / _APP_PREFIX / _CONFIG_FILE_NAME


def _try_read(specified_path: str | None) -> ConfigurationFile | None:
    if specified_path is not None:
        return read_configuration_file(specified_path)
    path = default_config_path()
    if not path.exists():
        return None
    return read_configuration_file(path)


@dataclass
class Configuration:
    """Effective application settings."""

    input_filename: str = ""
    output_filename: str | None = None
    fullscreen: bool = False
    early_exit: bool = False
    corner_roundness: float = 12.0
    initial_tool: Tools = Tools.POINTER
    copy_command: str | None = None
    annotation_size_factor: float = 1.0
    action_on_enter: Action = Action.SAVE_TO_CLIPBOARD
    save_after_copy: bool = False
    right_click_copy: bool = False
    color_palette: ColorPalette = field(default_factory=ColorPalette)
    default_hide_toolbars: bool = False
    font: FontConfiguration = field(default_factory=FontConfiguration)
    primary_highlighter: Highlighters = Highlighters.BLOCK
    disable_notifications: bool = False

    def _merge_general(self, general: _GeneralSection) -> None:
        for item in fields(general):
            value = getattr(general, item.name)
            if value is not None:
                setattr(self, item.name, value)

    def merge(self, file: ConfigurationFile | None, command_line: CommandLine) -> None:
        """Apply the file's settings, then the command line's, over the current ones."""
        self.input_filename = command_line.filename

        if file is not None:
            if file.general is not None:
                self._merge_general(file.general)
            if file.color_palette is not None:
                self.color_palette._merge(file.color_palette)
            if file.font is not None:
                self.font._merge(file.font)

        for flag in (
            "fullscreen",
            "early_exit",
            "default_hide_toolbars",
            "save_after_copy",
            "right_click_copy",
            "disable_notifications",
        ):
            if getattr(command_line, flag):
                setattr(self, flag, True)

        for option in (
            "corner_roundness",
            "initial_tool",
            "copy_command",
            "output_filename",
            "annotation_size_factor",
            "action_on_enter",
            "primary_highlighter",
        ):
            value = getattr(command_line, option)
            if value is not None:
                setattr(self, option, value)

        if command_line.font_family is not None:
            self.font.family = command_line.font_family
        if command_line.font_style is not None:
            self.font.style = command_line.font_style

    @classmethod
    def load(cls, argv: Sequence[str] | None = None) -> Configuration:
        """Build the configuration from ``argv`` and the config file.

        Exits with status 2 on invalid arguments and 3 on a broken config file.
        """
        command_line = parse_args(argv)
        try:
            file = _try_read(command_line.config)
        except ConfigurationError as e:
            print(f"Error reading config file: {e}", file=sys.stderr)
            for stream in (sys.stdout, sys.stderr):
                try:
                    stream.flush()
                except (OSError, ValueError):
                    pass
            raise SystemExit(_EXIT_CONFIG_ERROR) from e

        configuration = cls()
        configuration.merge(file, command_line)
        return configuration