"""Build the ordered default palette from a theme's primary and extended lists.

Drops records whose colour cannot be resolved, keeps the first entry per
#rrggbb key (primary before extended), then orders the survivors:

  dark neutrals    saturation < 15, lightness < 50, by lightness
  colored          by hue, ties by lightness
  light neutrals   saturation < 15, lightness >= 50, by lightness

Example:
    vincent-palette build theme.json
    vincent-palette build theme.json --extended more.json --json
"""

from vincent_palette.core.palette import build_classified
from vincent_palette.core.report import classified_row
from vincent_palette.core.types import Command, PaletteInput, Report

command = Command(
    name='build',
    help='Build the ordered default palette (dark neutrals, hues, light neutrals).',
)


@command.run
def run(palette_input: PaletteInput, report: Report, args) -> None:
    ordered = build_classified(palette_input.primary, palette_input.extended)

    report.ensure_section('palette')
    for item in ordered:
        report.add('palette', classified_row(item))

    report.count('input', len(palette_input.primary) + len(palette_input.extended))
    report.count('output', len(ordered))
