#!/usr/bin/env python3
"""
termascii - Colored text art for the terminal
Core conversion: decode with Pillow, resize, map luminance to glyphs and
render ANSI 24-bit colored lines.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import DecodeFailure, InvalidDimension, ResizeFailure, SourceNotFound
from .log import get_logger

logger = get_logger()

# Sparse-looking glyphs first, dense-looking glyphs last
GLYPH_RAMP = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

BLACK_BACKGROUND = "\033[48;2;0;0;0m"
RESET = "\033[0m"


@dataclass(frozen=True)
class RenderedFrame:
    """One rendered frame: its lines and how long it stays on screen (seconds)."""
    lines: tuple
    delay: float = 0.0


def open_image(path: str) -> Image.Image:
    """Decode a still image from path (environment variables expanded)."""
    path = os.path.expandvars(path)
    try:
        with Image.open(path) as img:
            image = img.convert('RGB')
    except FileNotFoundError as e:
        raise SourceNotFound(f"File not found: {path}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeFailure(f"Cannot decode image {path}: {e}") from e

    logger.debug("decoded %s (%dx%d)", path, image.width, image.height)
    return image


def open_animation(path: str) -> list:
    """Decode every frame of an animation as (image, delay) pairs.

    The delay is the container's native per-frame delay field, which for GIF
    counts hundredths of a second. Pillow reports it as ``duration`` in
    milliseconds, so it is scaled back down here.
    """
    path = os.path.expandvars(path)
    frames = []
    try:
        with Image.open(path) as img:
            for frame_num in range(getattr(img, 'n_frames', 1)):
                img.seek(frame_num)
                duration = img.info.get('duration') or 0
                frames.append((img.convert('RGB'), int(round(duration / 10))))
    except FileNotFoundError as e:
        raise SourceNotFound(f"File not found: {path}") from e
    except (UnidentifiedImageError, EOFError, OSError) as e:
        raise DecodeFailure(f"Cannot decode animation {path}: {e}") from e

    logger.debug("decoded %s (%d frames)", path, len(frames))
    return frames


def resize_image(image: Image.Image, width: int = 0, height: int = 0) -> Image.Image:
    """Resize image, deriving an unspecified (<= 0) side from the aspect ratio."""
    src_width, src_height = image.size
    if src_width <= 0 or src_height <= 0:
        raise InvalidDimension(f"Source image has no area: {src_width}x{src_height}")

    if width <= 0 and height <= 0:
        return image
    elif width <= 0:
        width = int(height * src_width / src_height + 0.5)
    elif height <= 0:
        height = int(width * src_height / src_width + 0.5)

    if width <= 0 or height <= 0:
        raise InvalidDimension(f"Target size has no area: {width}x{height}")

    logger.debug("resizing %dx%d -> %dx%d", src_width, src_height, width, height)
    try:
        return image.resize((width, height), Image.Resampling.LANCZOS)
    except (ValueError, OSError) as e:
        raise ResizeFailure(f"Could not resize to {width}x{height}: {e}") from e


def luminance(r: int, g: int, b: int) -> float:
    """ITU-R BT.601 luma of an 8-bit RGB sample, in [0, 255]."""
    # Integer weights keep white at exactly 255.0
    return (299 * r + 587 * g + 114 * b) / 1000


def select_glyph(gray: int) -> str:
    """Pick the ramp glyph for an integer gray level in [0, 255]."""
    return GLYPH_RAMP[gray * (len(GLYPH_RAMP) - 1) // 255]


def render_row(pixels) -> str:
    """Render an iterable of (r, g, b) samples as one colored terminal line."""
    parts = []
    for r, g, b in pixels:
        glyph = select_glyph(int(luminance(r, g, b)))
        parts.append(f"{BLACK_BACKGROUND}\033[38;2;{r};{g};{b}m{glyph}{glyph}")
    parts.append(RESET + "\n")
    return ''.join(parts)


def render_image(image: Image.Image) -> list:
    """Render every row of an image, top to bottom."""
    if image.mode != 'RGB':
        image = image.convert('RGB')

    width, height = image.size
    pixel_data = image.tobytes()
    stride = width * 3

    lines = []
    for y in range(height):
        row = pixel_data[y * stride:(y + 1) * stride]
        lines.append(render_row(zip(row[0::3], row[1::3], row[2::3])))
    return lines


def get_ascii_image(path: str, width: int = 0, height: int = 0) -> list:
    """Convert a still image into a one-frame sequence."""
    image = resize_image(open_image(path), width, height)
    return [RenderedFrame(tuple(render_image(image)))]


def get_ascii_gif(path: str, width: int = 0, height: int = 0) -> list:
    """Convert every frame of an animation, keeping decode order and delays."""
    frames = []
    for image, delay_ms in open_animation(path):
        image = resize_image(image, width, height)
        frames.append(RenderedFrame(tuple(render_image(image)), delay_ms / 1000.0))

    logger.debug("rendered %d frames from %s", len(frames), path)
    return frames


def is_animated(path: str) -> bool:
    """Check whether a file holds more than one frame."""
    path = os.path.expandvars(path)
    try:
        with Image.open(path) as img:
            return getattr(img, 'is_animated', False)
    except FileNotFoundError as e:
        raise SourceNotFound(f"File not found: {path}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeFailure(f"Cannot decode image {path}: {e}") from e


def get_file_type(filepath: str) -> str:
    """Determine file type based on extension."""
    ext = Path(filepath).suffix.lower()

    image_exts = {'.png', '.jpg', '.jpeg', '.bmp', '.webp', '.tiff', '.tif', '.ico'}
    gif_ext = {'.gif'}

    if ext in image_exts:
        return 'image'
    elif ext in gif_ext:
        return 'gif'
    else:
        return 'unknown'
