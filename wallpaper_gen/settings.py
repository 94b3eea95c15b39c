"""
Generator state: share-link query strings and saved settings (versioned JSON).
A stored file with another version is discarded, never migrated.
"""
import json
import logging
import re
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs, urlencode

from .config import RESOLUTION_PRESETS, resolve_resolution
from .procedural.schema import GeneratorOptions

logger = logging.getLogger(__name__)

STORAGE_VERSION = 1

MODE_GRADIENT = "gradient"
MODE_THEMES = "themes"
MODES = (MODE_GRADIENT, MODE_THEMES)

SHARE_KEYS = ("m", "r", "s", "w", "h", "o", "c", "bg", "p", "seed")

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass
class GeneratorState:
    """What a user picked. Sizes are integer percents, as shown on the sliders."""
    mode: str = MODE_GRADIENT
    palette: str = "catppuccinMocha"
    custom_colors: list[str] = field(
        default_factory=lambda: ["#22c55e", "#3b82f6", "#a855f7", "#ef4444", "#eab308"]
    )
    background_color: str = "#212121"
    resolution: str = "4k"
    shape_count: int = 7
    shape_width: int = 12
    shape_height: int = 75
    overlap: int = 35
    seed: int | None = None


DEFAULT_STATE = GeneratorState()


def is_valid_hex_color(value: str) -> bool:
    return bool(_HEX_COLOR.match(value))


def state_to_options(state: GeneratorState) -> GeneratorOptions:
    """Gradient mode uses the custom colors and background; themes mode the named palette."""
    preset = resolve_resolution(state.resolution)
    gradient = state.mode == MODE_GRADIENT
    return GeneratorOptions(
        width=preset.width,
        height=preset.height,
        palette=list(state.custom_colors) if gradient else state.palette,
        shape_count=state.shape_count,
        seed=state.seed,
        shape_width_ratio=state.shape_width / 100,
        shape_height_ratio=state.shape_height / 100,
        overlap_ratio=state.overlap / 100,
        background_color=state.background_color if gradient else None,
    )


def encode_share_query(state: GeneratorState) -> str:
    """Compact query string that reproduces state (without the leading '?')."""
    params: dict[str, str] = {
        "m": state.mode,
        "r": state.resolution,
        "s": str(state.shape_count),
        "w": str(state.shape_width),
        "h": str(state.shape_height),
        "o": str(state.overlap),
    }
    if state.mode == MODE_GRADIENT:
        params["c"] = ",".join(state.custom_colors)
        params["bg"] = state.background_color
    else:
        params["p"] = state.palette
    if state.seed is not None:
        params["seed"] = str(state.seed)
    return urlencode(params)


def _int_in_range(value: str | None, lo: int, hi: int) -> int | None:
    if not value:
        return None
    try:
        num = int(value)
    except ValueError:
        return None
    return num if lo <= num <= hi else None


def parse_share_query(query: str) -> dict[str, Any] | None:
    """
    Accepted fields from a share query; invalid values are dropped.
    None when the query carries none of the share keys.
    """
    if not query:
        return None
    params = {k: v[0] for k, v in parse_qs(query.lstrip("?"), keep_blank_values=True).items()}
    if not any(k in params for k in SHARE_KEYS):
        return None

    parsed: dict[str, Any] = {}
    if params.get("m") in MODES:
        parsed["mode"] = params["m"]
    if params.get("r") in RESOLUTION_PRESETS:
        parsed["resolution"] = params["r"]

    for key, name, lo, hi in (
        ("s", "shape_count", 3, 15),
        ("w", "shape_width", 5, 25),
        ("h", "shape_height", 40, 95),
        ("o", "overlap", 0, 60),
    ):
        num = _int_in_range(params.get(key), lo, hi)
        if num is not None:
            parsed[name] = num

    colors = params.get("c")
    if colors:
        valid = [c for c in colors.split(",") if is_valid_hex_color(c)]
        if 2 <= len(valid) <= 10:
            parsed["custom_colors"] = valid

    bg = params.get("bg")
    if bg and is_valid_hex_color(bg):
        parsed["background_color"] = bg

    if params.get("p"):
        parsed["palette"] = params["p"]

    seed = params.get("seed")
    if seed:
        try:
            parsed["seed"] = int(seed)
        except ValueError:
            pass

    return parsed or None


def state_from_share_query(query: str) -> GeneratorState | None:
    """Defaults overlaid with whatever the query validly sets."""
    parsed = parse_share_query(query)
    if parsed is None:
        return None
    return GeneratorState(**parsed)


def load_settings(path: Path) -> GeneratorState | None:
    """
    Saved state merged over defaults, or None if nothing usable is stored.
    Wrong version or unreadable content deletes the file.
    """
    path = Path(path)
    if not path.exists():
        return None
    try:
        with open(path, encoding="utf-8") as f:
            stored = json.load(f)
        if stored.get("version") != STORAGE_VERSION:
            logger.warning("Discarding settings %s: version %r != %s", path, stored.get("version"), STORAGE_VERSION)
            path.unlink(missing_ok=True)
            return None
        data = dict(stored["state"])
        known = {k: v for k, v in data.items() if k in GeneratorState.__dataclass_fields__}
        state = GeneratorState(**known)
    except (OSError, json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
        logger.warning("Discarding unreadable settings %s: %s", path, e)
        path.unlink(missing_ok=True)
        return None
    if not isinstance(state.custom_colors, list) or len(state.custom_colors) < 2:
        state = replace(state, custom_colors=list(DEFAULT_STATE.custom_colors))
    return state


def save_settings(path: Path, state: GeneratorState) -> bool:
    """Write state (seed excluded). Returns False and logs if the file cannot be written."""
    path = Path(path)
    data = asdict(state)
    data["seed"] = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"version": STORAGE_VERSION, "state": data}, f, indent=2)
    except OSError as e:
        logger.warning("Failed to save settings to %s: %s", path, e)
        return False
    return True


def clear_settings(path: Path) -> None:
    Path(path).unlink(missing_ok=True)


def wallpaper_filename(palette: str | None, resolution: str, seed: int, prefix: str = "WP") -> str:
    """e.g. WP_DRACULA_4K_42.png; palette=None (gradient mode) gives WP_GRADIENT_FHD_7.png."""
    name = "GRADIENT" if palette is None else palette.upper()
    return f"{prefix}_{name}_{resolution.upper()}_{seed}.png"
