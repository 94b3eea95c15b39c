"""
Color math for palettes: parsing, HSL, relative luminance, and gradients
interpolated in CIE LCh so midpoints stay saturated instead of going muddy.
"""
import colorsys
import math
from typing import Callable, Sequence

import numpy as np
from PIL import ImageColor
from skimage import color as skcolor

from ..errors import ConfigurationError
from ..random_utils import create_seeded_random, random_range, shuffle_array

DARK_BACKGROUND = "#1e1e2e"
LIGHT_BACKGROUND = "#f5f5f5"

# Below this chroma a color is treated as gray and has no usable hue
_ACHROMATIC_CHROMA = 5e-5

RGB = tuple[float, float, float]  # each channel 0-1


def parse_color(value: str) -> RGB:
    """Any CSS-ish color string Pillow understands -> (r, g, b) floats in 0-1."""
    try:
        rgb = ImageColor.getrgb(value)
    except (ValueError, AttributeError) as e:
        raise ConfigurationError(f"Invalid color: {value!r}") from e
    return (rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """(r, g, b) floats in 0-1 -> lowercase #rrggbb, rounded and clipped."""
    channels = [min(255, max(0, int(round(float(c) * 255)))) for c in rgb[:3]]
    return "#{:02x}{:02x}{:02x}".format(*channels)


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Hue in degrees (any range), saturation and lightness in 0-1."""
    return rgb_to_hex(colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation))


def hsl_hue(rgb: RGB) -> float:
    """HSL hue in degrees; gray maps to 0."""
    h, _l, _s = colorsys.rgb_to_hls(*rgb)
    return h * 360.0


def with_hsl_hue(rgb: RGB, hue: float) -> RGB:
    """Same saturation and lightness, new hue."""
    _h, l, s = colorsys.rgb_to_hls(*rgb)
    return colorsys.hls_to_rgb((hue % 360) / 360.0, l, s)


def relative_luminance(value: str | RGB) -> float:
    """WCAG relative luminance, 0 (black) to 1 (white)."""
    rgb = parse_color(value) if isinstance(value, str) else value

    def _linear(c: float) -> float:
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (_linear(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def _rgb_to_lch(stops: list[RGB]) -> np.ndarray:
    """(N, 3) LCh with hue in degrees; NaN hue for achromatic stops."""
    rgb = np.asarray(stops, dtype=np.float64).reshape(1, -1, 3)
    lch = skcolor.lab2lch(skcolor.rgb2lab(rgb)).reshape(-1, 3)
    lch[:, 2] = np.degrees(lch[:, 2])
    lch[lch[:, 1] < _ACHROMATIC_CHROMA, 2] = np.nan
    return lch


def _lch_to_rgb(lch: Sequence[float]) -> RGB:
    l, c, h = lch
    arr = np.array([[[l, c, math.radians(h)]]], dtype=np.float64)
    rgb = skcolor.lab2rgb(skcolor.lch2lab(arr)).reshape(3)
    return (float(rgb[0]), float(rgb[1]), float(rgb[2]))


def _mix_lch(a: np.ndarray, b: np.ndarray, f: float) -> tuple[float, float, float]:
    """Linear L and C, hue along the shorter arc."""
    h0, h1 = a[2], b[2]
    if np.isnan(h0) and np.isnan(h1):
        hue = 0.0
    elif np.isnan(h0):
        hue = h1
    elif np.isnan(h1):
        hue = h0
    else:
        dh = h1 - h0
        if dh > 180:
            dh -= 360
        elif dh < -180:
            dh += 360
        hue = (h0 + f * dh) % 360
    return (
        float(a[0] + f * (b[0] - a[0])),
        float(a[1] + f * (b[1] - a[1])),
        float(hue),
    )


def lch_scale(colors: Sequence[str | RGB]) -> Callable[[float], str]:
    """
    Gradient through the given stops, evenly spaced over [0, 1].
    Returns f(t) -> hex; t outside [0, 1] is clamped.
    """
    if not colors:
        raise ConfigurationError("A color scale needs at least one color")
    stops = [parse_color(c) if isinstance(c, str) else tuple(c) for c in colors]
    lch = _rgb_to_lch(stops)
    segments = len(stops) - 1

    def scale(t: float) -> str:
        if segments == 0:
            return rgb_to_hex(stops[0])
        t = min(1.0, max(0.0, float(t)))
        pos = t * segments
        k = min(int(pos), segments - 1)
        return rgb_to_hex(_lch_to_rgb(_mix_lch(lch[k], lch[k + 1], pos - k)))

    return scale


def scale_colors(colors: Sequence[str | RGB], count: int) -> list[str]:
    """Sample count evenly spaced colors from lch_scale(colors)."""
    scale = lch_scale(colors)
    if count == 1:
        return [scale(0.5)]
    return [scale(i / (count - 1)) for i in range(count)]


def generate_random_palette(count: int = 7, seed: int | None = None) -> list[str]:
    """
    Roughly even color wheel from a random base hue, jittered and shuffled.
    Same seed, same palette.
    """
    random = create_seeded_random(seed)
    base_hue = random() * 360

    colors: list[str] = []
    for i in range(count):
        hue = (base_hue + (i * 360) / count + random_range(random, -20, 20)) % 360
        saturation = random_range(random, 0.5, 0.9)
        lightness = random_range(random, 0.5, 0.7)
        colors.append(hsl_to_hex(hue, saturation, lightness))

    return shuffle_array(random, colors)


def generate_complementary_palette(base_color: str, count: int = 7) -> list[str]:
    """base_color through to its opposite hue."""
    base = parse_color(base_color)
    base_hue = hsl_hue(base)
    return scale_colors([with_hsl_hue(base, base_hue), with_hsl_hue(base, base_hue + 180)], count)


def generate_analogous_palette(base_color: str, count: int = 7) -> list[str]:
    """base_color flanked by its neighbours 30 degrees either side."""
    base = parse_color(base_color)
    base_hue = hsl_hue(base)
    return scale_colors(
        [
            with_hsl_hue(base, base_hue - 30),
            with_hsl_hue(base, base_hue),
            with_hsl_hue(base, base_hue + 30),
        ],
        count,
    )


def get_contrasting_background(colors: Sequence[str]) -> str:
    """Dark background for light palettes, light for dark ones. Binary threshold at 0.5."""
    if not colors:
        raise ConfigurationError("Cannot pick a background for an empty palette")
    avg = sum(relative_luminance(c) for c in colors) / len(colors)
    return DARK_BACKGROUND if avg > 0.5 else LIGHT_BACKGROUND
