"""Default palette construction: dedupe, classify and order named colours.

Pipeline (pure, never raises):
  1. to_entries: resolve each raw record's colour, drop what fails.
  2. merge_unique: primary then extended, first occurrence of each
     lowercase #rrggbb key wins.
  3. classify: rounded HSL per entry.
  4. bucket: saturation < 15 is neutral, the rest are colored.
  5. order: neutrals by lightness; colored by hue, then lightness.
  6. assemble: dark neutrals, colored, light neutrals (lightness >= 50).

Sorting is stable, so entries with equal keys keep their merge order.
"""

from __future__ import annotations

import colorsys
from collections.abc import Iterable, Mapping
from typing import Any

from vincent_palette.core.colors import canonical_key, parse_color
from vincent_palette.core.types import (
    DARK_LIGHTNESS,
    NEUTRAL_SATURATION,
    ClassifiedColor,
    Color,
    NamedColor,
    RawColorEntry,
    round_half_up,
)

__all__ = [
    'DARK_LIGHTNESS',
    'NEUTRAL_SATURATION',
    'PaletteUtils',
    'build_classified',
    'build_default_palette',
    'classify',
    'merge_unique',
    'order_palette',
    'rgb_to_hsl',
    'to_entries',
    'to_records',
]


def _entry_name(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return str(value)


def to_entries(raw: Iterable[Any] | None) -> list[NamedColor]:
    """Resolve raw host records into NamedColors, skipping unusable ones.

    Anything that is not a list-like collection of records (None, scalars,
    strings, a single mapping) yields no entries.
    """
    result: list[NamedColor] = []
    if not isinstance(raw, Iterable) or isinstance(raw, (str, bytes, Mapping)):
        return result
    for value in raw:
        record = RawColorEntry.from_value(value)
        if record is None:
            continue
        color = parse_color(record.color)
        if color is None:
            continue
        result.append(NamedColor(name=_entry_name(record.name), color=color))
    return result


def merge_unique(primary: Iterable[NamedColor], extended: Iterable[NamedColor]) -> list[NamedColor]:
    """Concatenate primary then extended, keeping the first entry per colour key."""
    merged: list[NamedColor] = []
    seen: set[str] = set()
    for entries in (primary, extended):
        for entry in entries:
            key = canonical_key(entry.color)
            if key in seen:
                continue
            seen.add(key)
            merged.append(entry)
    return merged


def rgb_to_hsl(color: Color) -> tuple[int, int, int]:
    """Return (hue degrees, saturation %, lightness %), each rounded half-up.

    Achromatic colours get hue 0 and saturation 0. A hue that rounds up to
    360 wraps to 0.
    """
    hue, lightness, saturation = colorsys.rgb_to_hls(color.red_f, color.green_f, color.blue_f)
    return (
        round_half_up(hue * 360.0) % 360,
        round_half_up(saturation * 100.0),
        round_half_up(lightness * 100.0),
    )


def classify(entries: Iterable[NamedColor]) -> list[ClassifiedColor]:
    """Annotate each entry with its HSL projection, preserving order."""
    result = []
    for entry in entries:
        hue, saturation, lightness = rgb_to_hsl(entry.color)
        result.append(ClassifiedColor(entry=entry, hue=hue, saturation=saturation, lightness=lightness))
    return result


def order_palette(classified: Iterable[ClassifiedColor]) -> list[ClassifiedColor]:
    """Bucket and order classified entries: dark neutrals, colored, light neutrals."""
    neutrals = []
    colored = []
    for item in classified:
        if item.is_neutral:
            neutrals.append(item)
        else:
            colored.append(item)

    neutrals = sorted(neutrals, key=lambda c: c.lightness)
    colored = sorted(colored, key=lambda c: (c.hue, c.lightness))

    dark = [c for c in neutrals if c.is_dark]
    light = [c for c in neutrals if not c.is_dark]
    return dark + colored + light


def build_classified(primary: Iterable[Any] | None, extended: Iterable[Any] | None) -> list[ClassifiedColor]:
    """Run the whole pipeline, keeping the HSL annotations of the final order."""
    merged = merge_unique(to_entries(primary), to_entries(extended))
    return order_palette(classify(merged))


def build_default_palette(primary: Iterable[Any] | None, extended: Iterable[Any] | None) -> list[NamedColor]:
    """Build the curated default palette from two lists of raw colour records."""
    return [c.entry for c in build_classified(primary, extended)]


def to_records(entries: Iterable[NamedColor]) -> list[dict[str, Any]]:
    """Host-facing form: one {'name', 'color'} dict per entry."""
    return [{'name': e.name, 'color': e.color} for e in entries]


class PaletteUtils:
    """Stateless service wrapper for hosts that inject a palette helper."""

    def build_default_palette(
        self, primary: Iterable[Any] | None, extended: Iterable[Any] | None
    ) -> list[dict[str, Any]]:
        return to_records(build_default_palette(primary, extended))
