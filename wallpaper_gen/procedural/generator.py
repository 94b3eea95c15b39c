"""
Wallpaper generator: layout + render in one call.
options -> (our layout engine) -> config -> (our renderer) -> canvas -> PNG.
"""
from pathlib import Path

from .layout import layout
from .renderer import Canvas, PillowCanvas, render_wallpaper, save_png
from .schema import GeneratorOptions, WallpaperConfig


def generate_wallpaper(canvas: Canvas, options: GeneratorOptions) -> WallpaperConfig:
    """Lay out and paint onto canvas. Returns the config, including the seed used."""
    config = layout(options)
    render_wallpaper(canvas, config)
    return config


def save_wallpaper(options: GeneratorOptions, output_path: Path) -> tuple[WallpaperConfig, Path]:
    """Generate onto a fresh PillowCanvas and write it as PNG."""
    canvas = PillowCanvas(options.width, options.height)
    config = generate_wallpaper(canvas, options)
    return config, save_png(canvas, output_path)
