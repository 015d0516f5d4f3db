"""Screenshot annotation core: configuration, styles, geometry, undo stack and output handling."""

__version__ = "0.16.0"