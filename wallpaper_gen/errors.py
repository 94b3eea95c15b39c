"""
Errors raised by the wallpaper engine. The core raises; only the CLI catches.
"""


class WallpaperError(Exception):
    """Base for every engine error."""


class ConfigurationError(WallpaperError, ValueError):
    """Bad input: unknown palette or resolution, invalid option or color."""


class SurfaceError(WallpaperError, RuntimeError):
    """The drawing surface could not provide a 2D context."""


class ExtractionError(WallpaperError):
    """Image to palette extraction failed. Callers keep their previous palette."""
