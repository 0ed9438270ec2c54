"""Colour parsing: structured values, hex strings and CSS/SVG colour names.

Every parser here is total. Anything that cannot be resolved to a concrete
colour yields None, never an exception, so callers can filter silently.

Hex forms follow the host's convention: #RGB, #RRGGBB and #AARRGGBB
(alpha first). Colour names come from the CSS/SVG table Pillow ships in
PIL.ImageColor, matched case-insensitively with spaces and tabs ignored.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from PIL import ImageColor

from vincent_palette.core.types import Color

_HEX_RE = re.compile(r'^#([0-9a-fA-F]+)$')

TRANSPARENT = Color(0, 0, 0, 0)


def canonical_key(color: Color) -> str:
    """Deduplication identity for a colour: lowercase #rrggbb, alpha ignored."""
    return color.name()


def parse_hex(text: str) -> Color | None:
    """Parse #RGB, #RRGGBB or #AARRGGBB. None for anything else."""
    m = _HEX_RE.match(text)
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        r, g, b = (int(c * 2, 16) for c in digits)
        return Color(r, g, b)
    if len(digits) == 6:
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    if len(digits) == 8:
        a = int(digits[0:2], 16)
        return Color(int(digits[2:4], 16), int(digits[4:6], 16), int(digits[6:8], 16), a)
    return None


def parse_named(text: str) -> Color | None:
    """Look up a CSS/SVG colour name. None when unknown."""
    key = text.replace(' ', '').replace('\t', '').lower()
    if not key:
        return None
    if key == 'transparent':
        return TRANSPARENT
    if key not in ImageColor.colormap:
        return None
    r, g, b = ImageColor.getrgb(key)[:3]
    return Color(r, g, b)


def parse_color_string(text: str) -> Color | None:
    """Parse a textual colour specification (hex form or colour name)."""
    text = text.strip()
    if not text:
        return None
    if text.startswith('#'):
        return parse_hex(text)
    return parse_named(text)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


def _parse_channels(values: Sequence[Any]) -> Color | None:
    """RGB(A) channels: all ints in 0..255, or all floats in 0..1."""
    if len(values) not in (3, 4):
        return None
    if all(_is_int(v) for v in values):
        if not all(0 <= v <= 255 for v in values):
            return None
        return Color(*values)
    if all(_is_float(v) for v in values):
        if not all(0.0 <= v <= 1.0 for v in values):
            return None
        return Color.from_floats(*values)
    return None


def parse_color(value: Any) -> Color | None:
    """Resolve a structured or textual colour value.

    A Color is used directly; tuples/lists are read as channels; strings are
    parsed as hex or named colours. Everything else resolves to None.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, (tuple, list)):
        return _parse_channels(value)
    if isinstance(value, str):
        return parse_color_string(value)
    return None
