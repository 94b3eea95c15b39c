"""
Color derivation: random palettes, complementary/analogous gradients, contrast backgrounds.
"""
import re
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

HEX = re.compile(r"^#[0-9a-f]{6}$", re.IGNORECASE)


def _rgb(hex_color: str) -> tuple[int, int, int]:
    return tuple(int(hex_color[i: i + 2], 16) for i in (1, 3, 5))


class TestColorPrimitives(unittest.TestCase):

    def test_parse_and_hex(self):
        from wallpaper_gen.procedural.color import parse_color, rgb_to_hex

        self.assertEqual(rgb_to_hex(parse_color("#FF8000")), "#ff8000")
        self.assertEqual(rgb_to_hex(parse_color("#f80")), "#ff8800")
        self.assertEqual(rgb_to_hex(parse_color("hsl(0, 100%, 50%)")), "#ff0000")
        self.assertEqual(rgb_to_hex((1.2, -0.1, 0.5)), "#ff0080")

    def test_invalid_color(self):
        from wallpaper_gen.errors import ConfigurationError
        from wallpaper_gen.procedural.color import parse_color

        with self.assertRaises(ConfigurationError):
            parse_color("not a color")

    def test_hsl_to_hex(self):
        from wallpaper_gen.procedural.color import hsl_to_hex

        self.assertEqual(hsl_to_hex(120, 1.0, 0.5), "#00ff00")
        self.assertEqual(hsl_to_hex(-240, 1.0, 0.5), "#00ff00")

    def test_relative_luminance(self):
        from wallpaper_gen.procedural.color import relative_luminance

        self.assertAlmostEqual(relative_luminance("#ffffff"), 1.0)
        self.assertAlmostEqual(relative_luminance("#000000"), 0.0)
        self.assertAlmostEqual(relative_luminance("#ff0000"), 0.2126)


class TestLchScale(unittest.TestCase):

    def test_endpoints_and_clamp(self):
        from wallpaper_gen.procedural.color import lch_scale

        scale = lch_scale(["#22c55e", "#3b82f6", "#a855f7"])
        for got, want in ((scale(0), "#22c55e"), (scale(1), "#a855f7"), (scale(0.5), "#3b82f6")):
            for a, b in zip(_rgb(got), _rgb(want)):
                self.assertLessEqual(abs(a - b), 1)
        self.assertEqual(scale(-3), scale(0))
        self.assertEqual(scale(7), scale(1))

    def test_gray_stops_stay_gray(self):
        from wallpaper_gen.procedural.color import lch_scale

        r, g, b = _rgb(lch_scale(["#000000", "#ffffff"])(0.5))
        self.assertLessEqual(max(r, g, b) - min(r, g, b), 1)
        self.assertTrue(90 < r < 160)

    def test_single_stop(self):
        from wallpaper_gen.procedural.color import lch_scale, scale_colors

        self.assertEqual(lch_scale(["#123456"])(0.7), "#123456")
        self.assertEqual(scale_colors(["#123456", "#654321"], 1), [lch_scale(["#123456", "#654321"])(0.5)])


class TestPaletteGeneration(unittest.TestCase):

    def test_random_palette_shape(self):
        """Seven distinct hex colors, same for the same seed."""
        from wallpaper_gen.procedural.color import generate_random_palette

        colors = generate_random_palette(7, 123)
        self.assertEqual(len(colors), 7)
        for c in colors:
            self.assertRegex(c, HEX)
        self.assertEqual(len(set(colors)), 7)
        self.assertEqual(colors, generate_random_palette(7, 123))
        self.assertNotEqual(colors, generate_random_palette(7, 124))

    def test_random_palette_saturation_lightness_ranges(self):
        import colorsys

        from wallpaper_gen.procedural.color import generate_random_palette

        for c in generate_random_palette(12, 5):
            _h, l, s = colorsys.rgb_to_hls(*(v / 255 for v in _rgb(c)))
            self.assertTrue(0.48 <= l <= 0.72, c)
            self.assertTrue(0.45 <= s <= 0.95, c)

    def test_complementary(self):
        from wallpaper_gen.procedural.color import generate_complementary_palette

        colors = generate_complementary_palette("#ff0000", 5)
        self.assertEqual(len(colors), 5)
        for got, want in ((colors[0], "#ff0000"), (colors[-1], "#00ffff")):
            for a, b in zip(_rgb(got), _rgb(want)):
                self.assertLessEqual(abs(a - b), 1)

    def test_analogous_centered_on_base(self):
        from wallpaper_gen.procedural.color import generate_analogous_palette

        colors = generate_analogous_palette("#3b82f6", 5)
        self.assertEqual(len(colors), 5)
        for a, b in zip(_rgb(colors[2]), _rgb("#3b82f6")):
            self.assertLessEqual(abs(a - b), 1)

    def test_contrasting_background_threshold(self):
        from wallpaper_gen.errors import ConfigurationError
        from wallpaper_gen.procedural.color import DARK_BACKGROUND, LIGHT_BACKGROUND, get_contrasting_background

        self.assertEqual(get_contrasting_background(["#ffffff", "#eeeeee"]), DARK_BACKGROUND)
        self.assertEqual(get_contrasting_background(["#000000", "#ff0000"]), LIGHT_BACKGROUND)
        self.assertEqual(DARK_BACKGROUND, "#1e1e2e")
        self.assertEqual(LIGHT_BACKGROUND, "#f5f5f5")
        with self.assertRaises(ConfigurationError):
            get_contrasting_background([])


if __name__ == "__main__":
    unittest.main()
