# Procedural wallpaper engine: seeded layout, palettes, renderer

from .color import (
    generate_analogous_palette,
    generate_complementary_palette,
    generate_random_palette,
    get_contrasting_background,
)
from .generator import generate_wallpaper, save_wallpaper
from .layout import layout
from .palette import get_all_palettes, get_palette, get_palette_names, resolve_palette
from .renderer import PillowCanvas, render_wallpaper
from .schema import (
    ExplicitColors,
    GeneratorOptions,
    NamedTheme,
    PaletteDefinition,
    ShapeConfig,
    WallpaperConfig,
)

__all__ = [
    "generate_analogous_palette",
    "generate_complementary_palette",
    "generate_random_palette",
    "get_contrasting_background",
    "generate_wallpaper",
    "save_wallpaper",
    "layout",
    "get_all_palettes",
    "get_palette",
    "get_palette_names",
    "resolve_palette",
    "PillowCanvas",
    "render_wallpaper",
    "ExplicitColors",
    "GeneratorOptions",
    "NamedTheme",
    "PaletteDefinition",
    "ShapeConfig",
    "WallpaperConfig",
]
