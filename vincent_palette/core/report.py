"""Report builder: text and JSON output for vincent-palette results."""

import json
import os
from typing import Any

from vincent_palette.core.types import ClassifiedColor, NamedColor, Report

GROUP_TITLES = {
    'dark': 'dark neutrals',
    'colored': 'colored',
    'light': 'light neutrals',
}


def entry_row(entry: NamedColor) -> dict[str, Any]:
    """Report row for a plain palette entry."""
    return {'name': entry.name, 'color': entry.color.name()}


def classified_row(item: ClassifiedColor) -> dict[str, Any]:
    """Report row for a classified entry, HSL and group included."""
    row = entry_row(item.entry)
    row.update(
        {
            'hue': item.hue,
            'saturation': item.saturation,
            'lightness': item.lightness,
            'group': item.group,
        }
    )
    return row


def _label(row: dict[str, Any]) -> str:
    return row['name'] if row['name'] else '(unnamed)'


def _format_row(row: dict[str, Any]) -> str:
    line = f'  {row["color"]}  {_label(row):<20}'
    if 'hue' in row:
        line += f' h={row["hue"]:<3} s={row["saturation"]:<3} l={row["lightness"]:<3}'
    return line.rstrip()


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = 'vincent-palette:'
    if report.theme_path:
        header += f' {os.path.basename(report.theme_path)}'
    if report.extended_path:
        header += f' + {os.path.basename(report.extended_path)}'
    lines.append(header)
    lines.append('')

    for section, rows in report.sections.items():
        lines.append(f'\u2500\u2500 {section} ({len(rows)})')
        group = None
        for row in rows:
            if section == 'palette' and row.get('group') != group:
                group = row.get('group')
                lines.append(f'  [{GROUP_TITLES.get(group, group)}]')
            line = _format_row(row)
            if section == 'classified':
                line += f'  {row["group"]}'
            lines.append(line)
        lines.append('')

    if report.counts:
        parts = [f'{k} {v}' for k, v in report.counts.items()]
        lines.append('  '.join(parts))
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if report.theme_path:
        obj['theme'] = report.theme_path
    if report.extended_path:
        obj['extended'] = report.extended_path
    for section, rows in report.sections.items():
        obj[section] = rows
    obj['summary'] = dict(report.counts)
    return json.dumps(obj, indent=2)
