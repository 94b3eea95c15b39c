#!/usr/bin/env python3
"""
CLI: generate geometric pill wallpapers without installing the package.
Usage:
  python scripts/wallpaper.py generate --palette dracula --seed 42
  python scripts/wallpaper.py random --resolution 4k
  python scripts/wallpaper.py palettes
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wallpaper_gen.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
