"""Theme file loader.

A theme is a JSON object with optional `primary` and `extended` arrays of
{name, color} records. A bare top-level array is read as `primary`.
Individual records are NOT validated here; malformed ones are dropped later
by the palette builder. Only the document shape is checked.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


class ThemeError(ValueError):
    """Theme document is not valid JSON or has the wrong shape."""


@dataclass
class ThemeSpec:
    """Parsed theme file."""

    primary: list[Any] = field(default_factory=list)
    extended: list[Any] = field(default_factory=list)
    raw: str = ''  # original file text


def parse_theme_file(path: str) -> ThemeSpec:
    """Parse a theme file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_theme_string(text)


def parse_theme_string(text: str) -> ThemeSpec:
    """Parse a theme from a JSON string."""
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise ThemeError(f'Invalid theme JSON: {e}') from e

    if isinstance(doc, list):
        return ThemeSpec(primary=doc, raw=text)
    if not isinstance(doc, dict):
        raise ThemeError(f'Theme must be a JSON object or array, got {type(doc).__name__}')

    return ThemeSpec(
        primary=_extract_list(doc, 'primary'),
        extended=_extract_list(doc, 'extended'),
        raw=text,
    )


def _extract_list(doc: dict[str, Any], key: str) -> list[Any]:
    value = doc.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ThemeError(f'Theme key {key!r} must be an array, got {type(value).__name__}')
    return value
