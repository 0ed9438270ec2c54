"""Resolve and deduplicate theme entries without ordering them.

Counts how many records were supplied, how many resolved to a colour,
how many were dropped as unparseable, and how many were discarded as
duplicates of an earlier #rrggbb key.

Example:
    vincent-palette merge theme.json --extended more.json
"""

from vincent_palette.core.palette import merge_unique, to_entries
from vincent_palette.core.report import entry_row
from vincent_palette.core.types import Command, PaletteInput, Report

command = Command(
    name='merge',
    help='Parse and deduplicate entries. Report dropped and duplicate counts.',
)


@command.run
def run(palette_input: PaletteInput, report: Report, args) -> None:
    primary = to_entries(palette_input.primary)
    extended = to_entries(palette_input.extended)
    merged = merge_unique(primary, extended)

    report.ensure_section('merged')
    for entry in merged:
        report.add('merged', entry_row(entry))

    supplied = len(palette_input.primary) + len(palette_input.extended)
    valid = len(primary) + len(extended)
    report.count('input', supplied)
    report.count('valid', valid)
    report.count('invalid', supplied - valid)
    report.count('duplicates', valid - len(merged))
