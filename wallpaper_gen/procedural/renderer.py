"""
Wallpaper renderer: WallpaperConfig -> pixels on a drawing surface.
The surface is canvas-like (width, height, get_context("2d"), to_png);
PillowCanvas is the bundled implementation.
"""
import io
from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from ..errors import ConfigurationError, SurfaceError
from .schema import WallpaperConfig


class CanvasContext(Protocol):
    fill_style: str

    def begin_path(self) -> None: ...

    def round_rect(self, x: float, y: float, w: float, h: float, radius: float) -> None: ...

    def fill(self) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None: ...


class Canvas(Protocol):
    width: int
    height: int

    def get_context(self, kind: str) -> CanvasContext | None: ...

    def to_png(self) -> bytes: ...


class PillowCanvas:
    """
    RGBA raster surface. Like an HTML canvas, assigning width or height
    reallocates the backing image and clears it to transparent.
    """

    def __init__(self, width: int, height: int):
        self._width = int(width)
        self._height = int(height)
        self._image = self._blank()

    def _blank(self) -> Image.Image:
        return Image.new("RGBA", (self._width, self._height), (0, 0, 0, 0))

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = int(value)
        self._image = self._blank()

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = int(value)
        self._image = self._blank()

    @property
    def image(self) -> Image.Image:
        return self._image

    def get_context(self, kind: str) -> "PillowContext | None":
        if kind != "2d":
            return None
        return PillowContext(self)

    def to_png(self) -> bytes:
        buf = io.BytesIO()
        self._image.save(buf, format="PNG")
        return buf.getvalue()

    def to_array(self) -> np.ndarray:
        """(H, W, 4) uint8 copy of the pixels."""
        return np.array(self._image)


class PillowContext:
    """Subset of the 2D context API: solid fills, rectangles, rounded rectangles."""

    def __init__(self, canvas: PillowCanvas):
        self._canvas = canvas
        self.fill_style = "#000000"
        self._path: list[tuple[float, float, float, float, float]] = []

    def _draw(self) -> ImageDraw.ImageDraw:
        # Canvas may have been resized since the context was taken
        return ImageDraw.Draw(self._canvas.image)

    def _fill_rgba(self) -> tuple[int, ...]:
        try:
            return ImageColor.getcolor(self.fill_style, "RGBA")
        except ValueError as e:
            raise ConfigurationError(f"Invalid color: {self.fill_style!r}") from e

    def begin_path(self) -> None:
        self._path = []

    def round_rect(self, x: float, y: float, w: float, h: float, radius: float) -> None:
        self._path.append((x, y, w, h, radius))

    def fill(self) -> None:
        draw = self._draw()
        fill = self._fill_rgba()
        for x, y, w, h, radius in self._path:
            if w <= 0 or h <= 0:
                continue
            # Pillow boxes include their far edge
            draw.rounded_rectangle(
                [x, y, max(x, x + w - 1), max(y, y + h - 1)],
                radius=int(min(radius, w / 2, h / 2)),
                fill=fill,
            )

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        if w <= 0 or h <= 0:
            return
        self._draw().rectangle([x, y, max(x, x + w - 1), max(y, y + h - 1)], fill=self._fill_rgba())


def render_wallpaper(canvas: Canvas, config: WallpaperConfig) -> None:
    """
    Paint config onto canvas. Resizes the canvas to config.width x config.height
    (clearing it), fills the background, then paints shapes in config.paint_order().
    """
    ctx = canvas.get_context("2d")
    if ctx is None:
        raise SurfaceError("Could not get 2d context from canvas")

    width, height = config.width, config.height
    canvas.width = width
    canvas.height = height

    ctx.fill_style = config.background_color
    ctx.fill_rect(0, 0, width, height)

    for shape in config.paint_order():
        w = shape.width_ratio * width
        h = shape.height_ratio * height
        radius = shape.border_radius if shape.border_radius is not None else min(w, h) / 2
        ctx.fill_style = shape.color
        ctx.begin_path()
        ctx.round_rect(shape.x * width, shape.y * height, w, h, radius)
        ctx.fill()


def save_png(canvas: Canvas, output_path: Path) -> Path:
    """Encode the canvas as PNG and write it. Returns the path written."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix == "":
        output_path = output_path.with_suffix(".png")
    output_path.write_bytes(canvas.to_png())
    return output_path
