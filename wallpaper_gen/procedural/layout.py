"""
Layout engine: options + seed -> WallpaperConfig. Pure and deterministic.

Two policies, picked by which sizing fields GeneratorOptions carries:
- overlap (default): equal pills stepping right by width * (1 - overlap),
  centered as a group; painted back to front.
- randomized: each pill samples its own size from the ranges, packed with
  fixed spacing; centered on the average width, so the real span can drift
  a little off center. Painted front to back.
"""
import logging

from ..random_utils import RandomFn, create_seeded_random, new_seed, random_range, shuffle_array
from .color import lch_scale
from .palette import resolve_palette
from .schema import (
    DEFAULT_OVERLAP_RATIO,
    DEFAULT_SHAPE_HEIGHT_RANGE,
    DEFAULT_SHAPE_HEIGHT_RATIO,
    DEFAULT_SHAPE_WIDTH_RANGE,
    DEFAULT_SHAPE_WIDTH_RATIO,
    DEFAULT_SPACING,
    LAYOUT_OVERLAP,
    LAYOUT_RANDOMIZED,
    ExplicitColors,
    GeneratorOptions,
    ShapeConfig,
    WallpaperConfig,
)

logger = logging.getLogger(__name__)


def pill_radius(width_px: float, height_px: float) -> float:
    """Half the shorter side: a capsule, or a circle when square."""
    return min(width_px, height_px) / 2


def layout(options: GeneratorOptions) -> WallpaperConfig:
    """
    Compute every shape for one wallpaper. Same options and seed give the
    same config, bit for bit. Raises ConfigurationError on bad options or
    an unknown palette; nothing partial is returned.
    """
    options.validate()
    seed = options.seed if options.seed is not None else new_seed()
    random = create_seeded_random(seed)
    policy = options.policy
    logger.debug("layout: policy=%s shapes=%d seed=%d", policy, options.shape_count, seed)

    if policy == LAYOUT_RANDOMIZED:
        return _layout_randomized(options, random, seed)
    return _layout_overlap(options, random, seed)


def _layout_overlap(options: GeneratorOptions, random: RandomFn, seed: int) -> WallpaperConfig:
    width, height, count = options.width, options.height, options.shape_count
    resolved = resolve_palette(options.palette, options.background_color)
    colors = resolved.colors

    shape_width = _or_default(options.shape_width_ratio, DEFAULT_SHAPE_WIDTH_RATIO)
    shape_height = _or_default(options.shape_height_ratio, DEFAULT_SHAPE_HEIGHT_RATIO)
    overlap = _or_default(options.overlap_ratio, DEFAULT_OVERLAP_RATIO)

    step = shape_width * (1 - overlap)
    total_width = shape_width + (count - 1) * step
    start_x = (1 - total_width) / 2
    y = (1 - shape_height) / 2

    gradient = isinstance(options.palette_spec, ExplicitColors) and len(colors) >= 2
    if gradient:
        scale = lch_scale(colors)
        shuffled: list[str] = []
    else:
        shuffled = shuffle_array(random, colors)

    radius = pill_radius(shape_width * width, shape_height * height)
    shapes: list[ShapeConfig] = []
    for i in range(count):
        if gradient:
            t = i / (count - 1) if count > 1 else 0.5
            shape_color = scale(t)
        else:
            shape_color = shuffled[i % len(shuffled)]
        shapes.append(
            ShapeConfig(
                width_ratio=shape_width,
                height_ratio=shape_height,
                x=start_x + i * step,
                y=y,
                color=shape_color,
                border_radius=radius,
            )
        )

    return WallpaperConfig(
        width=width,
        height=height,
        background_color=resolved.background,
        palette=colors,
        shapes=shapes,
        seed=seed,
        layout=LAYOUT_OVERLAP,
    )


def _layout_randomized(options: GeneratorOptions, random: RandomFn, seed: int) -> WallpaperConfig:
    width, height, count = options.width, options.height, options.shape_count
    resolved = resolve_palette(options.palette, options.background_color, fallback_background=None)
    colors = resolved.colors

    w_min, w_max = _or_default(options.shape_width_range, DEFAULT_SHAPE_WIDTH_RANGE)
    h_min, h_max = _or_default(options.shape_height_range, DEFAULT_SHAPE_HEIGHT_RANGE)
    spacing = _or_default(options.spacing, DEFAULT_SPACING)

    shuffled = shuffle_array(random, colors)

    # Estimate only: real widths are sampled below
    avg_width = (w_min + w_max) / 2
    estimated_total = count * avg_width + (count - 1) * spacing
    x = (1 - estimated_total) / 2

    shapes: list[ShapeConfig] = []
    for i in range(count):
        shape_width = random_range(random, w_min, w_max)
        shape_height = random_range(random, h_min, h_max)
        shapes.append(
            ShapeConfig(
                width_ratio=shape_width,
                height_ratio=shape_height,
                x=x,
                y=(1 - shape_height) / 2,
                color=shuffled[i % len(shuffled)],
                border_radius=pill_radius(shape_width * width, shape_height * height),
            )
        )
        x += shape_width + spacing

    return WallpaperConfig(
        width=width,
        height=height,
        background_color=resolved.background,
        palette=colors,
        shapes=shapes,
        seed=seed,
        layout=LAYOUT_RANDOMIZED,
    )


def _or_default(value, default):
    return default if value is None else value
