"""
Wallpaper schema: generator options in, shape layout out.
All positions and sizes are fractions of the canvas (0-1); border radius is in pixels.
"""
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

from ..errors import ConfigurationError

LAYOUT_OVERLAP = "overlap"
LAYOUT_RANDOMIZED = "randomized"
LAYOUT_POLICIES = (LAYOUT_OVERLAP, LAYOUT_RANDOMIZED)

DEFAULT_SHAPE_WIDTH_RATIO = 0.12
DEFAULT_SHAPE_HEIGHT_RATIO = 0.75
DEFAULT_OVERLAP_RATIO = 0.35
DEFAULT_SHAPE_WIDTH_RANGE = (0.08, 0.16)
DEFAULT_SHAPE_HEIGHT_RANGE = (0.5, 0.85)
DEFAULT_SPACING = 0.02


@dataclass(frozen=True)
class PaletteDefinition:
    """Static catalog entry. Renaming or removing one breaks share links and stored settings."""
    name: str
    display_name: str
    colors: tuple[str, ...]
    background: str
    accent: str | None = None


@dataclass(frozen=True)
class NamedTheme:
    """Palette given by catalog key."""
    name: str


@dataclass(frozen=True)
class ExplicitColors:
    """Palette given as the caller's own ordered colors (gradient mode when 2+)."""
    colors: tuple[str, ...]


PaletteSpec = NamedTheme | ExplicitColors


def as_palette_spec(palette: "str | Sequence[str] | PaletteSpec") -> PaletteSpec:
    """str -> NamedTheme, sequence of colors -> ExplicitColors; tagged values pass through."""
    if isinstance(palette, (NamedTheme, ExplicitColors)):
        return palette
    if isinstance(palette, str):
        return NamedTheme(palette)
    return ExplicitColors(tuple(palette))


@dataclass(frozen=True)
class GeneratorOptions:
    """
    Input for one layout. Which sizing fields are set picks the layout policy:
    shape_width_range / shape_height_range -> "randomized", otherwise "overlap".
    """
    width: int
    height: int
    palette: "str | Sequence[str] | PaletteSpec"
    shape_count: int
    seed: int | None = None
    # overlap policy
    shape_width_ratio: float | None = None
    shape_height_ratio: float | None = None
    overlap_ratio: float | None = None
    # randomized policy
    shape_width_range: tuple[float, float] | None = None
    shape_height_range: tuple[float, float] | None = None
    spacing: float | None = None
    # only used with explicit colors
    background_color: str | None = None

    @property
    def palette_spec(self) -> PaletteSpec:
        return as_palette_spec(self.palette)

    @property
    def policy(self) -> str:
        if self.shape_width_range is not None or self.shape_height_range is not None:
            return LAYOUT_RANDOMIZED
        return LAYOUT_OVERLAP

    def validate(self) -> None:
        """Raise ConfigurationError on values no layout can use."""
        if not isinstance(self.width, int) or self.width <= 0:
            raise ConfigurationError(f"width must be a positive integer, got {self.width!r}")
        if not isinstance(self.height, int) or self.height <= 0:
            raise ConfigurationError(f"height must be a positive integer, got {self.height!r}")
        if not isinstance(self.shape_count, int) or self.shape_count < 1:
            raise ConfigurationError(f"shape_count must be at least 1, got {self.shape_count!r}")
        for name in ("shape_width_ratio", "shape_height_ratio", "overlap_ratio", "spacing"):
            value = getattr(self, name)
            if value is not None and not 0 <= value <= 1:
                raise ConfigurationError(f"{name} must be within [0, 1], got {value!r}")
        for name in ("shape_width_range", "shape_height_range"):
            value = getattr(self, name)
            if value is None:
                continue
            lo, hi = value
            if not 0 <= lo <= hi <= 1:
                raise ConfigurationError(f"{name} must satisfy 0 <= min <= max <= 1, got {value!r}")


@dataclass
class ShapeConfig:
    """One pill: box as canvas fractions, fill color, corner radius in pixels."""
    width_ratio: float
    height_ratio: float
    x: float
    y: float
    color: str
    border_radius: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "width_ratio": self.width_ratio,
            "height_ratio": self.height_ratio,
            "x": self.x,
            "y": self.y,
            "color": self.color,
            "border_radius": self.border_radius,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeConfig":
        return cls(
            width_ratio=float(data["width_ratio"]),
            height_ratio=float(data["height_ratio"]),
            x=float(data["x"]),
            y=float(data["y"]),
            color=str(data["color"]),
            border_radius=float(data["border_radius"]),
        )


@dataclass
class WallpaperConfig:
    """
    Layout result and renderer input. seed is the seed actually used,
    including one picked automatically; keep it to reproduce the wallpaper.
    """
    width: int
    height: int
    background_color: str
    palette: list[str]
    shapes: list[ShapeConfig] = field(default_factory=list)
    seed: int = 0
    layout: str = LAYOUT_OVERLAP

    def paint_order(self) -> Iterator[ShapeConfig]:
        """Shapes in the order they are painted. Overlap layouts paint back to front so shape 0 ends on top."""
        if self.layout == LAYOUT_OVERLAP:
            return reversed(self.shapes)
        return iter(self.shapes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON export and logging."""
        return {
            "width": self.width,
            "height": self.height,
            "background_color": self.background_color,
            "palette": list(self.palette),
            "shapes": [s.to_dict() for s in self.shapes],
            "seed": self.seed,
            "layout": self.layout,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WallpaperConfig":
        return cls(
            width=int(data["width"]),
            height=int(data["height"]),
            background_color=str(data["background_color"]),
            palette=list(data.get("palette", [])),
            shapes=[ShapeConfig.from_dict(s) for s in data.get("shapes", [])],
            seed=int(data.get("seed", 0)),
            layout=data.get("layout", LAYOUT_OVERLAP),
        )
