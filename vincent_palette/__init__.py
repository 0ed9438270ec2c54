"""vincent-palette: default palette construction for the Vincent theme editor."""

from vincent_palette.core.palette import PaletteUtils, build_default_palette, to_records
from vincent_palette.core.types import Color, NamedColor, RawColorEntry

__all__ = [
    'Color',
    'NamedColor',
    'PaletteUtils',
    'RawColorEntry',
    'build_default_palette',
    'to_records',
]
