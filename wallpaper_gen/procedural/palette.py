"""
Palette resolution: named theme or explicit colors -> concrete colors + background.
"""
from dataclasses import dataclass
from typing import Sequence

from ..errors import ConfigurationError
from .color import parse_color
from .data.palettes import PALETTES
from .schema import NamedTheme, PaletteDefinition, PaletteSpec, as_palette_spec

# Background for explicit colors when the caller gives none
DEFAULT_CUSTOM_BACKGROUND = "#0a0a0a"


@dataclass(frozen=True)
class ResolvedPalette:
    colors: list[str]
    background: str


def get_palette(name: str) -> PaletteDefinition | None:
    return PALETTES.get(name)


def get_palette_names() -> list[str]:
    return list(PALETTES.keys())


def get_all_palettes() -> list[PaletteDefinition]:
    return list(PALETTES.values())


def resolve_palette(
    palette: "str | Sequence[str] | PaletteSpec",
    custom_background: str | None = None,
    *,
    fallback_background: str | None = DEFAULT_CUSTOM_BACKGROUND,
) -> ResolvedPalette:
    """
    Named theme: catalog colors and background, verbatim.
    Explicit colors: the list as given; background is custom_background,
    else fallback_background, else (fallback_background=None) the first color.
    """
    spec = as_palette_spec(palette)
    if custom_background:
        parse_color(custom_background)
    if isinstance(spec, NamedTheme):
        definition = get_palette(spec.name)
        if definition is None:
            raise ConfigurationError(
                f"Unknown palette: {spec.name}. Available: {', '.join(get_palette_names())}"
            )
        return ResolvedPalette(list(definition.colors), definition.background)

    colors = list(spec.colors)
    if not colors:
        raise ConfigurationError("Explicit palette needs at least one color")
    for c in colors:
        parse_color(c)
    if custom_background:
        background = custom_background
    elif fallback_background is not None:
        background = fallback_background
    else:
        background = colors[0]
    return ResolvedPalette(colors, background)
