"""
Load and expose app config (YAML). Used by the CLI to get output dir, default palette, sizing, etc.
"""
from pathlib import Path
from typing import Any, NamedTuple

import yaml

from .errors import ConfigurationError
from .procedural.schema import LAYOUT_POLICIES, LAYOUT_RANDOMIZED, GeneratorOptions


class Resolution(NamedTuple):
    width: int
    height: int
    label: str


RESOLUTION_PRESETS: dict[str, Resolution] = {
    "hd": Resolution(1280, 720, "HD (1280x720)"),
    "fhd": Resolution(1920, 1080, "Full HD (1920x1080)"),
    "qhd": Resolution(2560, 1440, "QHD (2560x1440)"),
    "4k": Resolution(3840, 2160, "4K (3840x2160)"),
    "ultrawide": Resolution(3440, 1440, "Ultrawide (3440x1440)"),
    "mobile": Resolution(1080, 1920, "Mobile (1080x1920)"),
}


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    defaults = _defaults()
    if not path.exists():
        return defaults
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config {path} must be a mapping, got {type(data).__name__}")
    merged = dict(defaults)
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(defaults.get(section), dict):
            merged[section] = {**defaults[section], **values}
        else:
            merged[section] = values
    return merged


def _defaults() -> dict[str, Any]:
    return {
        "output": {
            "dir": ".",
            "filename_prefix": "WP",
        },
        "generator": {
            "palette": "catppuccinMocha",
            "resolution": "fhd",
            "shape_count": 7,
            "shape_width": 0.12,
            "shape_height": 0.75,
            "overlap": 0.35,
            "layout": "overlap",
            "background_color": None,
        },
        "randomized": {
            "shape_width_range": [0.08, 0.16],
            "shape_height_range": [0.5, 0.85],
            "spacing": 0.02,
        },
        "settings": {"path": None},
    }


def resolve_resolution(key: str) -> Resolution:
    """Preset by key; ConfigurationError lists the valid keys."""
    preset = RESOLUTION_PRESETS.get(key)
    if preset is None:
        raise ConfigurationError(
            f"Unknown resolution preset: {key}. Available: {', '.join(RESOLUTION_PRESETS)}"
        )
    return preset


def resolve_dimensions(resolution: str, width: int | None = None, height: int | None = None) -> tuple[int, int]:
    """Explicit width AND height win; otherwise the preset's size."""
    if width and height:
        return int(width), int(height)
    preset = resolve_resolution(resolution)
    return preset.width, preset.height


def options_from_config(config: dict[str, Any], **overrides: Any) -> GeneratorOptions:
    """
    Build GeneratorOptions from the generator/randomized sections.
    overrides: width, height, palette, shape_count, seed, background_color,
    shape_width, shape_height, overlap, layout. None means "use config".
    """
    gen = {**config.get("generator", {}), **{k: v for k, v in overrides.items() if v is not None}}
    rnd = config.get("randomized", {})
    policy = gen.get("layout", "overlap")
    if policy not in LAYOUT_POLICIES:
        raise ConfigurationError(f"Unknown layout: {policy}. Available: {', '.join(LAYOUT_POLICIES)}")

    width, height = gen.get("width"), gen.get("height")
    if not (width and height):
        width, height = resolve_dimensions(gen.get("resolution", "fhd"))

    common: dict[str, Any] = {
        "width": int(width),
        "height": int(height),
        "palette": gen["palette"],
        "shape_count": int(gen.get("shape_count", 7)),
        "seed": gen.get("seed"),
        "background_color": gen.get("background_color"),
    }
    if policy == LAYOUT_RANDOMIZED:
        return GeneratorOptions(
            **common,
            shape_width_range=tuple(rnd.get("shape_width_range", (0.08, 0.16))),
            shape_height_range=tuple(rnd.get("shape_height_range", (0.5, 0.85))),
            spacing=rnd.get("spacing"),
        )
    return GeneratorOptions(
        **common,
        shape_width_ratio=gen.get("shape_width"),
        shape_height_ratio=gen.get("shape_height"),
        overlap_ratio=gen.get("overlap"),
    )


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve output directory (relative to the working directory if needed)."""
    out = config.get("output", {})
    return Path(out.get("dir") or ".").expanduser().resolve()
