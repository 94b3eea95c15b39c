"""
CLI: generate geometric pill wallpapers as PNG.
Usage:
  wallpaper generate --palette dracula --resolution 4k --seed 42
  wallpaper generate --colors "#22c55e,#3b82f6,#a855f7" --background "#212121" --share
  wallpaper generate --from-link "m=themes&r=fhd&s=7&w=12&h=75&o=35&p=nord&seed=7"
  wallpaper random --shapes 9
  wallpaper from-image photo.jpg
  wallpaper palettes
  wallpaper resolutions
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from .analysis import extract_palette
from .config import RESOLUTION_PRESETS, get_output_dir, load_config, options_from_config, resolve_dimensions
from .errors import ConfigurationError, ExtractionError, WallpaperError
from .procedural import generate_random_palette, get_all_palettes, save_wallpaper
from .procedural.schema import LAYOUT_OVERLAP, GeneratorOptions, WallpaperConfig
from .random_utils import new_seed
from .settings import (
    MODE_GRADIENT,
    MODE_THEMES,
    GeneratorState,
    encode_share_query,
    load_settings,
    save_settings,
    state_from_share_query,
    state_to_options,
    wallpaper_filename,
)
from .workflow_utils import log_structured, setup_logging

logger = logging.getLogger(__name__)


def _add_canvas_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--shapes", "-s", type=int, default=None, help="Number of shapes (default: from config, 7).")
    parser.add_argument(
        "--resolution",
        "-r",
        default=None,
        help=f"Resolution preset ({', '.join(RESOLUTION_PRESETS)}). Default: from config, fhd.",
    )
    parser.add_argument("--width", "-W", type=int, default=None, help="Custom width (needs --height too).")
    parser.add_argument("--height", "-H", type=int, default=None, help="Custom height (needs --width too).")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output PNG path (default: <output dir>/WP_<PALETTE>_<RES>_<seed>.png).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--layout",
        choices=("overlap", "randomized"),
        default=None,
        help="overlap: equal overlapping pills; randomized: random sizes with spacing.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wallpaper", description="Generate geometric pill wallpapers.")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a wallpaper from a named palette or your own colors.")
    _add_canvas_args(gen)
    gen.add_argument("--palette", "-p", default=None, help="Palette name (see `wallpaper palettes`).")
    gen.add_argument("--colors", default=None, help="Comma-separated colors; shapes follow a gradient through them.")
    gen.add_argument("--background", default=None, help="Background color for --colors.")
    gen.add_argument("--shape-width", type=int, default=None, help="Shape width, percent of canvas width.")
    gen.add_argument("--shape-height", type=int, default=None, help="Shape height, percent of canvas height.")
    gen.add_argument("--overlap", type=int, default=None, help="Overlap between neighbours, percent of shape width.")
    gen.add_argument("--from-link", default=None, help="Reproduce a share-link query string.")
    gen.add_argument("--last", action="store_true", help="Start from the saved settings (config settings.path).")
    gen.add_argument("--share", action="store_true", help="Print a share-link query string for this wallpaper.")
    gen.set_defaults(func=cmd_generate)

    rnd = sub.add_parser("random", help="Generate a wallpaper with a random color-wheel palette.")
    _add_canvas_args(rnd)
    rnd.set_defaults(func=cmd_random)

    img = sub.add_parser("from-image", help="Generate a wallpaper with colors taken from an image.")
    img.add_argument("image", type=Path, help="Image file to take colors from.")
    _add_canvas_args(img)
    img.set_defaults(func=cmd_from_image)

    pal = sub.add_parser("palettes", help="List available color palettes.")
    pal.set_defaults(func=cmd_palettes)

    res = sub.add_parser("resolutions", help="List available resolution presets.")
    res.set_defaults(func=cmd_resolutions)
    return parser


def _percent(value: int | None) -> float | None:
    return None if value is None else value / 100


def _build_options(args: argparse.Namespace, config: dict[str, Any], palette: Any, seed: int, **extra: Any) -> GeneratorOptions:
    gen_cfg = config.get("generator", {})
    resolution = args.resolution or gen_cfg.get("resolution", "fhd")
    width, height = resolve_dimensions(resolution, args.width, args.height)
    return options_from_config(
        config,
        width=width,
        height=height,
        palette=palette,
        shape_count=args.shapes,
        seed=seed,
        layout=args.layout,
        **extra,
    )


def _resolution_label(args: argparse.Namespace, config: dict[str, Any]) -> str:
    if args.width and args.height:
        return f"{args.width}x{args.height}"
    return args.resolution or config.get("generator", {}).get("resolution", "fhd")


def _output_path(args: argparse.Namespace, config: dict[str, Any], palette_name: str | None, seed: int) -> Path:
    if args.output is not None:
        return args.output
    prefix = config.get("output", {}).get("filename_prefix", "WP")
    return get_output_dir(config) / wallpaper_filename(palette_name, _resolution_label(args, config), seed, prefix)


def _write(options: GeneratorOptions, output: Path) -> tuple[WallpaperConfig, Path]:
    wp, path = save_wallpaper(options, output)
    log_structured(
        "info",
        event="wallpaper_generated",
        path=str(path),
        width=wp.width,
        height=wp.height,
        layout=wp.layout,
        shapes=len(wp.shapes),
        seed=wp.seed,
    )
    print(f"Wallpaper saved to {path}")
    print(f"  Resolution: {wp.width}x{wp.height}")
    return wp, path


def _settings_path(config: dict[str, Any]) -> Path | None:
    path = config.get("settings", {}).get("path")
    return Path(path).expanduser() if path else None


def _generate_from_state(args: argparse.Namespace, config: dict[str, Any], state: GeneratorState) -> int:
    if state.seed is None:
        state.seed = new_seed()
    options = state_to_options(state)
    palette_name = None if state.mode == MODE_GRADIENT else state.palette
    output = args.output or get_output_dir(config) / wallpaper_filename(
        palette_name, state.resolution, state.seed, config.get("output", {}).get("filename_prefix", "WP")
    )
    _write(options, output)
    print(f"  Palette: {palette_name or ', '.join(state.custom_colors)}")
    print(f"  Shapes: {state.shape_count}")
    print(f"  Seed: {state.seed}")
    if args.share:
        print(f"  Share: ?{encode_share_query(state)}")
    return 0


def cmd_generate(args: argparse.Namespace, config: dict[str, Any]) -> int:
    if args.from_link:
        state = state_from_share_query(args.from_link)
        if state is None:
            raise ConfigurationError(f"Share link carries no wallpaper settings: {args.from_link!r}")
        return _generate_from_state(args, config, state)

    settings_path = _settings_path(config)
    if args.last:
        state = load_settings(settings_path) if settings_path else None
        if state is None:
            raise ConfigurationError("No saved settings to restore (set settings.path in the config)")
        state.seed = args.seed
        return _generate_from_state(args, config, state)

    gen_cfg = config.get("generator", {})
    seed = args.seed if args.seed is not None else new_seed()
    colors = [c.strip() for c in args.colors.split(",") if c.strip()] if args.colors else None
    palette_name = None if colors else (args.palette or gen_cfg.get("palette", "catppuccinMocha"))

    options = _build_options(
        args,
        config,
        colors or palette_name,
        seed,
        background_color=args.background,
        shape_width=_percent(args.shape_width),
        shape_height=_percent(args.shape_height),
        overlap=_percent(args.overlap),
    )
    _write(options, _output_path(args, config, palette_name, seed))
    print(f"  Palette: {palette_name or ', '.join(colors)}")
    print(f"  Shapes: {options.shape_count}")
    print(f"  Seed: {seed}")

    state = GeneratorState(
        mode=MODE_GRADIENT if colors else MODE_THEMES,
        palette=palette_name or gen_cfg.get("palette", "catppuccinMocha"),
        custom_colors=colors or GeneratorState().custom_colors,
        background_color=args.background or GeneratorState().background_color,
        resolution=args.resolution or gen_cfg.get("resolution", "fhd"),
        shape_count=options.shape_count,
        shape_width=round((options.shape_width_ratio or gen_cfg.get("shape_width", 0.12)) * 100),
        shape_height=round((options.shape_height_ratio or gen_cfg.get("shape_height", 0.75)) * 100),
        overlap=round((options.overlap_ratio if options.overlap_ratio is not None else gen_cfg.get("overlap", 0.35)) * 100),
        seed=seed,
    )
    if settings_path:
        save_settings(settings_path, state)
    if args.share:
        if options.policy != LAYOUT_OVERLAP or (args.width and args.height):
            print("  Share: not available for randomized layouts or custom sizes")
        else:
            print(f"  Share: ?{encode_share_query(state)}")
    return 0


def cmd_random(args: argparse.Namespace, config: dict[str, Any]) -> int:
    seed = args.seed if args.seed is not None else new_seed()
    shape_count = args.shapes if args.shapes is not None else config.get("generator", {}).get("shape_count", 7)
    colors = generate_random_palette(shape_count, seed)
    options = _build_options(args, config, colors, seed)
    _write(options, _output_path(args, config, None, seed))
    print(f"  Seed: {seed} (use this to reproduce)")
    print("  Colors:")
    for i, c in enumerate(colors, start=1):
        print(f"    {i}. {c}")
    return 0


def cmd_from_image(args: argparse.Namespace, config: dict[str, Any]) -> int:
    seed = args.seed if args.seed is not None else new_seed()
    palette_name = None
    background = None
    try:
        extracted = extract_palette(args.image)
        palette: Any = extracted.colors
        background = extracted.background_color
    except ExtractionError as e:
        palette_name = config.get("generator", {}).get("palette", "catppuccinMocha")
        palette = palette_name
        logger.warning("Image colors unusable (%s); keeping palette %s", e, palette_name)
        print(f"Could not use colors from {args.image}: {e}. Keeping palette {palette_name}.", file=sys.stderr)

    options = _build_options(args, config, palette, seed, background_color=background)
    _write(options, _output_path(args, config, palette_name, seed))
    if palette_name is None:
        print(f"  Colors: {', '.join(palette)}")
        print(f"  Background: {background}")
    else:
        print(f"  Palette: {palette_name}")
    print(f"  Seed: {seed}")
    return 0


def cmd_palettes(args: argparse.Namespace, config: dict[str, Any]) -> int:
    print("\nAvailable Palettes:\n")
    for p in get_all_palettes():
        print(f"{p.display_name} ({p.name})")
        print(f"  {' '.join(p.colors)}")
        print(f"  Background: {p.background}")
        print()
    return 0


def cmd_resolutions(args: argparse.Namespace, config: dict[str, Any]) -> int:
    print("\nAvailable Resolutions:\n")
    for key, preset in RESOLUTION_PRESETS.items():
        print(f"  {key:<12} {preset.label}")
    print()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        config = load_config(args.config)
        return args.func(args, config)
    except WallpaperError as e:
        print(f"Failed to generate wallpaper: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
