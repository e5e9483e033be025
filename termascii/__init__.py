"""
termascii - Colored Text Art for Terminal
Turns images and animated GIFs into 24-bit colored glyphs and plays them back.
"""

__version__ = "1.0.0"

from .core import (
    GLYPH_RAMP,
    RenderedFrame,
    luminance,
    select_glyph,
    resize_image,
    render_row,
    render_image,
    get_ascii_image,
    get_ascii_gif,
    get_file_type,
)
from .player import print_image, play_gif, save_as_text
from .errors import (
    ConversionError,
    SourceNotFound,
    DecodeFailure,
    InvalidDimension,
    ResizeFailure,
)

__all__ = [
    "GLYPH_RAMP",
    "RenderedFrame",
    "luminance",
    "select_glyph",
    "resize_image",
    "render_row",
    "render_image",
    "get_ascii_image",
    "get_ascii_gif",
    "get_file_type",
    "print_image",
    "play_gif",
    "save_as_text",
    "ConversionError",
    "SourceNotFound",
    "DecodeFailure",
    "InvalidDimension",
    "ResizeFailure",
]
