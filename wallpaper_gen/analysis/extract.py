"""
Image -> palette: pick vibrant shape colors and a neutral background from a photo.
Pillow median-cut quantisation over a pixel sample; our selection rules on top.
"""
import colorsys
import logging
import math
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from ..errors import ExtractionError
from ..procedural.color import rgb_to_hex

logger = logging.getLogger(__name__)

FALLBACK_BACKGROUND = "#212121"
MAX_SHAPE_COLORS = 8
MAX_FALLBACK_COLORS = 5


@dataclass(frozen=True)
class ColorCandidate:
    hex: str
    area: float  # share of sampled pixels, 0-1
    hue: float  # 0-360
    saturation: float  # HSL, 0-1
    lightness: float  # HSL, 0-1


@dataclass(frozen=True)
class ExtractedPalette:
    colors: list[str]
    background_color: str


def _load_pixels(image_path: Path) -> np.ndarray:
    """(N, 4) RGBA uint8."""
    try:
        with Image.open(image_path) as img:
            rgba = np.asarray(img.convert("RGBA"))
    except OSError as e:
        raise ExtractionError(f"Please select an image file ({image_path})") from e
    return rgba.reshape(-1, 4)


def extract_candidates(
    image_path: Path,
    *,
    num_candidates: int = 16,
    sample_pixels: int = 50000,
) -> list[ColorCandidate]:
    """
    Quantise a sample of opaque, not-near-black, not-near-white pixels into
    at most num_candidates colors, largest area first.
    """
    pixels = _load_pixels(Path(image_path))
    if len(pixels) > sample_pixels:
        pixels = pixels[:: math.ceil(len(pixels) / sample_pixels)]

    brightness = pixels[:, :3].astype(np.float64).mean(axis=1)
    keep = (pixels[:, 3] > 250) & (brightness > 20) & (brightness < 240)
    rgb = pixels[keep, :3]
    if len(rgb) == 0:
        return []

    sample = Image.fromarray(np.ascontiguousarray(rgb.reshape(1, -1, 3), dtype=np.uint8))
    quantized = sample.quantize(colors=num_candidates, method=Image.Quantize.MEDIANCUT)
    flat_palette = quantized.getpalette() or []
    counts = quantized.getcolors(maxcolors=256) or []
    total = float(len(rgb))

    by_hex: dict[str, float] = {}
    for count, index in counts:
        r, g, b = flat_palette[index * 3: index * 3 + 3]
        hex_color = rgb_to_hex((r / 255.0, g / 255.0, b / 255.0))
        by_hex[hex_color] = by_hex.get(hex_color, 0.0) + count / total

    candidates = []
    for hex_color, area in by_hex.items():
        r, g, b = (int(hex_color[i: i + 2], 16) / 255.0 for i in (1, 3, 5))
        h, l, s = colorsys.rgb_to_hls(r, g, b)
        candidates.append(ColorCandidate(hex_color, area, h * 360.0, s, l))
    candidates.sort(key=lambda c: c.area, reverse=True)
    logger.debug("extract_candidates: %d candidates from %d pixels (%s)", len(candidates), len(rgb), image_path)
    return candidates


def select_palette(candidates: list[ColorCandidate]) -> ExtractedPalette:
    """
    Background: darkest low-saturation candidate, else darkest overall.
    Shapes: the most vibrant candidates that are not the background;
    falls back to any non-background candidates when fewer than two are vibrant.
    """
    vibrant = sorted(
        (c for c in candidates if c.saturation > 0.25 and 0.15 < c.lightness < 0.85),
        key=lambda c: c.saturation * c.area,
        reverse=True,
    )
    neutrals = sorted((c for c in candidates if c.saturation < 0.3), key=lambda c: c.lightness)

    if neutrals:
        background = neutrals[0].hex
    elif candidates:
        background = min(candidates, key=lambda c: c.lightness).hex
    else:
        background = FALLBACK_BACKGROUND

    shape_colors = [c.hex for c in vibrant if c.hex.lower() != background.lower()][:MAX_SHAPE_COLORS]
    if len(shape_colors) < 2:
        shape_colors = [c.hex for c in candidates if c.hex.lower() != background.lower()][:MAX_FALLBACK_COLORS]
    return ExtractedPalette(colors=shape_colors, background_color=background)


def extract_palette(image_path: Path, *, sample_pixels: int = 50000) -> ExtractedPalette:
    """
    Palette for gradient mode from an image. Raises ExtractionError when the
    file is not an image, nothing usable is found, or fewer than two colors remain.
    """
    candidates = extract_candidates(image_path, sample_pixels=sample_pixels)
    if not candidates:
        raise ExtractionError("Could not extract colors from this image")
    palette = select_palette(candidates)
    if len(palette.colors) < 2:
        raise ExtractionError("Not enough distinct colors found in image")
    return palette
