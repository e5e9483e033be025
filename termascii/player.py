#!/usr/bin/env python3
"""
termascii - Colored text art for the terminal
Printing still images and timed playback of animations.
"""

import sys
import time

from .core import RenderedFrame
from .log import get_logger

logger = get_logger()

CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
RESET_COLOR = "\033[0m"

# Source delays are stretched by this factor before sleeping
DELAY_MULTIPLIER = 10
# Floor so zero-delay frames don't flicker past unseen
MIN_FRAME_DELAY = 0.033


def frame_sleep(frame: RenderedFrame) -> float:
    """Seconds to keep a frame on screen."""
    return max(DELAY_MULTIPLIER * frame.delay, MIN_FRAME_DELAY)


def print_image(image, stream=None):
    """Write a rendered still image once. Accepts a one-frame sequence or its lines."""
    if stream is None:
        stream = sys.stdout
    if image and isinstance(image[0], RenderedFrame):
        image = image[0].lines
    for line in image:
        stream.write(line)
    stream.flush()


def play_gif(frames, loop: int = 1, stream=None, sleep=time.sleep):
    """Play rendered frames in place, `loop` times over."""
    if stream is None:
        stream = sys.stdout

    stream.write(HIDE_CURSOR + CLEAR_SCREEN + CURSOR_HOME)
    stream.flush()

    try:
        for iteration in range(loop):
            logger.debug("loop %d/%d", iteration + 1, loop)
            for frame in frames:
                # Home rather than clear: redraw in place without flicker
                stream.write(CURSOR_HOME + ''.join(frame.lines))
                stream.flush()
                sleep(frame_sleep(frame))
    finally:
        stream.write(SHOW_CURSOR + RESET_COLOR)
        stream.flush()


def save_as_text(frames, output_path: str):
    """Write every rendered frame to a file that can be viewed with `cat`."""
    with open(output_path, 'w', encoding='utf-8') as f:
        for frame in frames:
            f.writelines(frame.lines)
    logger.debug("saved %d frames to %s", len(frames), output_path)
