"""Shared types for vincent-palette: Color, RawColorEntry, NamedColor, ClassifiedColor, Command, Report."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

# Saturation (percent) below which a colour counts as neutral.
NEUTRAL_SATURATION = 15
# Lightness (percent) below which a neutral is placed before the hues.
DARK_LIGHTNESS = 50


def round_half_up(value: float) -> int:
    """Round to nearest int, halves away from zero (all inputs here are >= 0)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels. Alpha is carried but never part of identity."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f'Colour channel out of range: {channel!r}')

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> Color:
        """Build from normalized 0..1 channels."""
        for channel in (red, green, blue, alpha):
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f'Normalized channel out of range: {channel!r}')
        return cls(
            round_half_up(red * 255),
            round_half_up(green * 255),
            round_half_up(blue * 255),
            round_half_up(alpha * 255),
        )

    @property
    def red_f(self) -> float:
        return self.red / 255.0

    @property
    def green_f(self) -> float:
        return self.green / 255.0

    @property
    def blue_f(self) -> float:
        return self.blue / 255.0

    def name(self) -> str:
        """Lowercase #rrggbb."""
        return f'#{self.red:02x}{self.green:02x}{self.blue:02x}'

    def name_argb(self) -> str:
        """Lowercase #aarrggbb."""
        return f'#{self.alpha:02x}{self.red:02x}{self.green:02x}{self.blue:02x}'


@dataclass(frozen=True)
class RawColorEntry:
    """A loosely-typed palette entry as supplied by the host.

    `color` may be a Color, an RGB(A) tuple, a textual spec, or anything else
    (which later fails to parse and is dropped).
    """

    name: Any = None
    color: Any = None

    @classmethod
    def from_value(cls, value: Any) -> RawColorEntry | None:
        """Coerce a host record into a RawColorEntry. None for unusable records."""
        if isinstance(value, RawColorEntry):
            return value
        if isinstance(value, Mapping):
            if not value:
                return None
            return cls(name=value.get('name'), color=value.get('color'))
        return None


@dataclass(frozen=True)
class NamedColor:
    """A validated palette entry: display name plus resolved colour."""

    name: str
    color: Color

    @property
    def key(self) -> str:
        """Canonical deduplication key (lowercase hex RGB)."""
        return self.color.name()


@dataclass(frozen=True)
class ClassifiedColor:
    """A NamedColor annotated with its rounded HSL projection."""

    entry: NamedColor
    hue: int  # degrees, 0..359
    saturation: int  # percent, 0..100
    lightness: int  # percent, 0..100

    @property
    def is_neutral(self) -> bool:
        return self.saturation < NEUTRAL_SATURATION

    @property
    def is_dark(self) -> bool:
        return self.lightness < DARK_LIGHTNESS

    @property
    def group(self) -> str:
        """Section this entry lands in: 'dark', 'colored' or 'light'."""
        if not self.is_neutral:
            return 'colored'
        return 'dark' if self.is_dark else 'light'


@dataclass
class PaletteInput:
    """The two ordered lists handed to a command."""

    primary: list[Any] = field(default_factory=list)
    extended: list[Any] = field(default_factory=list)


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='build', help='Build the ordered palette')

        @command.run
        def run(palette_input, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, palette_input: PaletteInput, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(palette_input, report, args)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    theme_path: str | None = None
    extended_path: str | None = None
    sections: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    counts: dict[str, int] = field(default_factory=dict)

    def add(self, section: str, row: dict[str, Any]) -> None:
        """Append one row to a named section, creating it on first use."""
        self.sections.setdefault(section, []).append(row)

    def ensure_section(self, section: str) -> None:
        self.sections.setdefault(section, [])

    def count(self, key: str, value: int) -> None:
        self.counts[key] = value
