# Geometric wallpaper generator: seeded pill layouts, palettes, PNG export

from .errors import ConfigurationError, ExtractionError, SurfaceError, WallpaperError
from .config import RESOLUTION_PRESETS, load_config
from .random_utils import create_seeded_random, pick_random, random_int, random_range, shuffle_array
from .procedural import (
    GeneratorOptions,
    PillowCanvas,
    WallpaperConfig,
    generate_random_palette,
    generate_wallpaper,
    layout,
    render_wallpaper,
    resolve_palette,
)

__all__ = [
    "ConfigurationError",
    "ExtractionError",
    "SurfaceError",
    "WallpaperError",
    "RESOLUTION_PRESETS",
    "load_config",
    "create_seeded_random",
    "pick_random",
    "random_int",
    "random_range",
    "shuffle_array",
    "GeneratorOptions",
    "PillowCanvas",
    "WallpaperConfig",
    "generate_random_palette",
    "generate_wallpaper",
    "layout",
    "render_wallpaper",
    "resolve_palette",
]
