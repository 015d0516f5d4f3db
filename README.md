# satty

Core of a screenshot annotation tool. The package loads a screenshot, merges
settings from a TOML configuration file and the command line, and handles the
finished image: it saves it as a PNG file, puts it on the clipboard, or pipes
it into a copy command such as `wl-copy`. It also provides the pieces an
annotation editor is built from: vectors and rectangle helpers, colours and
annotation sizes, an undo/redo stack, the canvas-to-image transformation and
keyboard shortcut matching.

## Installation

```
pip install .
```

## The `satty` command

`satty` reads its configuration, loads the image given with `--filename` and
then performs the configured Enter action (`--action-on-enter`) on it straight
away: `save-to-clipboard` (the default) or `save-to-file`.

```
satty --filename screenshot.png --action-on-enter save-to-file --output-filename "satty-%Y%m%d-%H%M%S.png"
```

Pass `-` as the filename to read the image from standard input:

```
grim - | satty --filename - --copy-command wl-copy
```

Copying pipes the PNG data into `--copy-command` through `sh -c`. Without a
copy command the image goes to `wl-copy` or, failing that, `xclip`, whichever
is found first. The output filename is passed through `strftime` and must end
in `.png`.

Options:

- `-f`, `--filename PATH` — input image, or `-` for standard input (required)
- `-c`, `--config PATH` — configuration file (default: `$XDG_CONFIG_HOME/satty/config.toml`, or `~/.config/satty/config.toml`)
- `-o`, `--output-filename NAME` — file to save to; may contain strftime specifiers
- `--copy-command CMD` — command that receives the PNG on standard input
- `--action-on-enter ACTION` — `save-to-clipboard` or `save-to-file`
- `--save-after-copy` — after copying, save to the output file as well
- `--disable-notifications` — do not send desktop notifications (sent with `notify-send` when it is installed)
- `--fullscreen`, `--early-exit`, `--right-click-copy`, `-d`/`--default-hide-toolbars`
- `--corner-roundness N`, `--annotation-size-factor F`
- `--initial-tool TOOL` (alias `--init-tool`) — one of `pointer`, `crop`, `line`, `arrow`, `rectangle`, `ellipse`, `text`, `marker`, `blur`, `highlight`, `brush`
- `--font-family NAME`, `--font-style STYLE`
- `--primary-highlighter KIND` — `block` or `freehand`
- `-V`, `--version`

The options in the last four lines are read and merged into the
configuration, but the command itself does not act on them.

Exit status: 0 on success, 1 if the image cannot be loaded, 2 for invalid
arguments, 3 if the configuration file cannot be read or decoded.

## Configuration file

```toml
[general]
fullscreen = true
early-exit = true
corner-roundness = 12
initial-tool = "brush"
copy-command = "wl-copy"
annotation-size-factor = 2
output-filename = "/tmp/test-%Y-%m-%d_%H:%M:%S.png"
save-after-copy = false
default-hide-toolbars = false
primary-highlighter = "block"
disable-notifications = false
action-on-enter = "save-to-clipboard"
right-click-copy = false

[font]
family = "Roboto"
style = "Bold"

[color-palette]
palette = ["#00ffff", "#a52a2a", "#dc143c", "#ff1493", "#ffd700", "#008000"]
custom = ["#00ffff", "#a52a2a"]
```

Colours may be written as `#RGB`, `#RGBA`, `#RRGGBB` or `#RRGGBBAA`. Unknown
sections and keys are rejected. Values given on the command line take
precedence over the file.

## Library use

```python
from satty.geometry import Vec2D, rect_ensure_positive_size
from satty.style import Color, Size, Style
from satty.configuration import Configuration, parse_configuration_file
from satty.canvas import DrawableStack, ViewTransform, render_region
from satty.sketch_board import KeyEvent, shortcut_for, CONTROL_MASK

pos, size = rect_ensure_positive_size(Vec2D(10, 10), Vec2D(-5, 4))
width = Size.MEDIUM.to_line_width(1.0)
rgba = Color.from_hex("#ff8800").to_rgba_u32()

config = Configuration()
config.merge(parse_configuration_file('[general]\nearly-exit = true\n'), command_line)

transform = ViewTransform()
transform.update(1920, 1080, 960, 540)
point = transform.abs_canvas_to_image_coordinates(Vec2D(100, 50), 1.0)

shortcut = shortcut_for(KeyEvent("z", 52, CONTROL_MASK))  # Shortcut.UNDO
```

Here `command_line` is a `satty.command_line.CommandLine`, as returned by
`satty.command_line.parse_args`. `Configuration.load(argv)` does both steps
and reads the configuration file itself. `satty.sketch_board.OutputHandler`
saves or copies a Pillow image according to a `Configuration`.

## What this package does not do

There is no annotation window. The `satty` command does not open an editor or
let you draw; it performs the Enter action on the unchanged image. There are
no drawing tools (arrows, rectangles, text, blur and so on) and no rendering:
`satty.canvas.Drawable` is only the abstract interface that such tools would
implement, and settings such as the initial tool, fonts, corner roundness and
toolbar visibility are parsed but not used.