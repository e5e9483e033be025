import re
import sys
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from termascii.core import GLYPH_RAMP, RESET, render_image, render_row

ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def visible(line):
    return ESCAPE.sub("", line).rstrip("\n")


class RenderRowTests(unittest.TestCase):
    def test_red_then_blue(self):
        line = render_row([(255, 0, 0), (0, 0, 255)])
        red, blue = GLYPH_RAMP[20], GLYPH_RAMP[7]
        expected = (
            "\x1b[48;2;0;0;0m\x1b[38;2;255;0;0m" + red * 2
            + "\x1b[48;2;0;0;0m\x1b[38;2;0;0;255m" + blue * 2
            + "\x1b[0m\n"
        )
        self.assertEqual(line, expected)

    def test_two_glyphs_per_pixel(self):
        row = [(x * 7 % 256, x * 13 % 256, x * 29 % 256) for x in range(37)]
        self.assertEqual(len(visible(render_row(row))), 74)

    def test_colors_are_not_quantized(self):
        line = render_row([(1, 2, 3)])
        self.assertIn("\x1b[38;2;1;2;3m", line)

    def test_empty_row_is_just_reset(self):
        self.assertEqual(render_row([]), RESET + "\n")


class RenderImageTests(unittest.TestCase):
    def test_scenario_two_by_one(self):
        img = Image.new("RGB", (2, 1))
        img.putpixel((0, 0), (255, 0, 0))
        img.putpixel((1, 0), (0, 0, 255))
        lines = render_image(img)
        self.assertEqual(lines, [render_row([(255, 0, 0), (0, 0, 255)])])

    def test_one_line_per_row(self):
        img = Image.new("RGB", (5, 3), (255, 255, 255))
        lines = render_image(img)
        self.assertEqual(len(lines), 3)
        for line in lines:
            self.assertEqual(visible(line), GLYPH_RAMP[-1] * 10)
            self.assertTrue(line.endswith(RESET + "\n"))

    def test_rows_render_top_to_bottom(self):
        img = Image.new("RGB", (1, 2))
        img.putpixel((0, 0), (0, 0, 0))
        img.putpixel((0, 1), (255, 255, 255))
        top, bottom = render_image(img)
        self.assertIn("38;2;0;0;0m", top)
        self.assertIn("38;2;255;255;255m", bottom)

    def test_alpha_is_discarded(self):
        img = Image.new("RGBA", (1, 1), (10, 20, 30, 0))
        (line,) = render_image(img)
        self.assertIn("\x1b[38;2;10;20;30m", line)


if __name__ == "__main__":
    unittest.main()
