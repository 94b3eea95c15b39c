# Image analysis: derive palettes from user images

from .extract import ExtractedPalette, extract_candidates, extract_palette, select_palette

__all__ = [
    "ExtractedPalette",
    "extract_candidates",
    "extract_palette",
    "select_palette",
]
