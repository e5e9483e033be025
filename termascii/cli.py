#!/usr/bin/env python3
"""
termascii CLI - Command line interface for showing images and GIFs as colored text.
"""

import argparse
import os
import sys
from pathlib import Path

from . import __version__
from .core import get_ascii_image, get_ascii_gif, get_file_type, is_animated
from .errors import ConversionError
from .log import configure_logging
from .player import print_image, play_gif, save_as_text


def build_parser():
    parser = argparse.ArgumentParser(
        prog='termascii',
        description='Display images and animated GIFs in the terminal as 24-bit colored text',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  termascii image.png                   # Display an image 80 glyph pairs wide
  termascii animation.gif --loop 3      # Play an animated GIF three times
  termascii photo.jpg -w 0 -H 40        # 40 lines tall, width from aspect ratio
  termascii image.png --save            # Save as .ans file
  termascii image.png --save -o out.ans # Save with custom filename

Supported formats:
  Images: PNG, JPG, JPEG, BMP, WebP, TIFF, ICO
  Animated: GIF

Tip: View saved files with: cat filename.ans
        '''
    )

    parser.add_argument('file', help='Path to image or GIF file')
    parser.add_argument('-w', '--width', type=int, default=80,
                        help='Width in glyph pairs, 0 to derive from height (default: 80)')
    parser.add_argument('-H', '--height', type=int, default=0,
                        help='Height in lines, 0 to derive from width (default: 0)')
    parser.add_argument('-l', '--loop', type=int, default=1,
                        help='Number of times to play an animation (default: 1)')
    parser.add_argument('-s', '--save', action='store_true',
                        help='Save the rendered text to a file instead of displaying')
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Output filename for --save (default: <input>.ans)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log pipeline details to stderr')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logger = configure_logging(args.verbose)

    try:
        # Validate arguments
        if not os.path.exists(os.path.expandvars(args.file)):
            print(f"Error: File not found: {args.file}")
            sys.exit(1)

        file_type = get_file_type(args.file)
        animated = file_type != 'unknown' and is_animated(args.file)
        if animated:
            frames = get_ascii_gif(args.file, args.width, args.height)
        else:
            if file_type == 'unknown':
                logger.warning("Unknown file type, attempting to display as image...")
            frames = get_ascii_image(args.file, args.width, args.height)

        # Save mode
        if args.save:
            output = args.output or Path(args.file).stem + '.ans'
            save_as_text(frames, output)
            print(f"Saved: {output}")
            print(f"View with: cat \"{output}\"")
            return

        if animated:
            play_gif(frames, args.loop)
        else:
            print_image(frames)

    except ConversionError as e:
        logger.debug("conversion failed", exc_info=True)
        print(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(0)


if __name__ == '__main__':
    main()
