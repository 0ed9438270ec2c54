"""Show the HSL projection and bucket of every merged palette entry.

Entries are listed in merge order (primary first, duplicates removed) with
rounded hue, saturation and lightness and the group each would be placed
in by `build`. Useful for checking why a colour lands where it does.

Example:
    vincent-palette classify theme.json
"""

from vincent_palette.core.palette import classify, merge_unique, to_entries
from vincent_palette.core.report import classified_row
from vincent_palette.core.types import Command, PaletteInput, Report

command = Command(
    name='classify',
    help='List merged entries with rounded HSL and neutral/colored bucket.',
)


@command.run
def run(palette_input: PaletteInput, report: Report, args) -> None:
    merged = merge_unique(to_entries(palette_input.primary), to_entries(palette_input.extended))
    classified = classify(merged)

    report.ensure_section('classified')
    for item in classified:
        report.add('classified', classified_row(item))

    neutral = sum(1 for c in classified if c.is_neutral)
    report.count('merged', len(classified))
    report.count('neutral', neutral)
    report.count('colored', len(classified) - neutral)
