"""
Palette catalog and resolution: named themes vs explicit colors.
"""
import re
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

HEX = re.compile(r"^#[0-9a-f]{6}$")


class TestCatalog(unittest.TestCase):

    def test_catalog_entries_well_formed(self):
        from wallpaper_gen.procedural.palette import get_all_palettes, get_palette_names

        palettes = get_all_palettes()
        self.assertEqual(len(palettes), 21)
        self.assertEqual([p.name for p in palettes], get_palette_names())
        for p in palettes:
            self.assertEqual(len(p.colors), 7, p.name)
            for c in (*p.colors, p.background):
                self.assertRegex(c, HEX)

    def test_get_palette(self):
        from wallpaper_gen.procedural.palette import get_palette

        self.assertEqual(get_palette("nord").display_name, "Nord")
        self.assertIsNone(get_palette("nope"))


class TestResolvePalette(unittest.TestCase):

    def test_named_theme_verbatim(self):
        from wallpaper_gen.procedural.palette import resolve_palette

        resolved = resolve_palette("dracula")
        self.assertEqual(resolved.background, "#282a36")
        self.assertEqual(resolved.colors[0], "#ff5555")
        self.assertEqual(len(resolved.colors), 7)

    def test_named_theme_ignores_custom_background(self):
        from wallpaper_gen.procedural.palette import resolve_palette

        self.assertEqual(resolve_palette("nord", "#ffffff").background, "#2e3440")

    def test_unknown_name_lists_valid_keys(self):
        from wallpaper_gen.errors import ConfigurationError
        from wallpaper_gen.procedural.palette import resolve_palette

        with self.assertRaises(ConfigurationError) as ctx:
            resolve_palette("not-a-real-theme")
        self.assertIn("Unknown palette: not-a-real-theme", str(ctx.exception))
        self.assertIn("dracula", str(ctx.exception))

    def test_explicit_colors_background_choices(self):
        from wallpaper_gen.procedural.palette import DEFAULT_CUSTOM_BACKGROUND, resolve_palette

        colors = ["#112233", "#445566"]
        self.assertEqual(resolve_palette(colors, "#abcdef").background, "#abcdef")
        self.assertEqual(resolve_palette(colors).background, DEFAULT_CUSTOM_BACKGROUND)
        self.assertEqual(resolve_palette(colors, fallback_background=None).background, "#112233")
        self.assertEqual(resolve_palette(colors).colors, colors)

    def test_tagged_specs(self):
        from wallpaper_gen.procedural.palette import resolve_palette
        from wallpaper_gen.procedural.schema import ExplicitColors, NamedTheme

        self.assertEqual(resolve_palette(NamedTheme("nord")).background, "#2e3440")
        self.assertEqual(resolve_palette(ExplicitColors(("#000000",))).colors, ["#000000"])

    def test_empty_explicit_list_fails(self):
        from wallpaper_gen.errors import ConfigurationError
        from wallpaper_gen.procedural.palette import resolve_palette

        with self.assertRaises(ConfigurationError):
            resolve_palette([])


if __name__ == "__main__":
    unittest.main()
