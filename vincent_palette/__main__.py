"""vincent-palette: build the default colour palette for a Vincent theme.

Usage: vincent-palette <command> [theme.json] [options]

Commands are auto-discovered from vincent_palette/commands/.
Each command module's docstring is its documentation.
Run `vincent-palette help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, vincent-palette looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.

  VINCENT_THEME   theme file used when none is given on the command line
  VINCENT_OUTPUT  'json' to make JSON the default output
"""

import argparse
import importlib
import os
import sys
from typing import NoReturn

from vincent_palette import registry
from vincent_palette.core.env import Settings, load_env, load_settings
from vincent_palette.core.palette import to_entries
from vincent_palette.core.report import format_json, format_text
from vincent_palette.core.theme import ThemeError, parse_theme_file
from vincent_palette.core.types import PaletteInput, Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'vincent_palette.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  vincent-palette build theme.json\n'
        '  vincent-palette build theme.json --extended extra.json --json\n'
        '  vincent-palette classify theme.json\n'
        '  vincent-palette merge theme.json -e extra.json\n'
        '  vincent-palette help build\n'
        '\n'
        'Theme files are JSON: {"primary": [{"name": ..., "color": ...}], "extended": [...]}\n'
        'Colours may be #RGB, #RRGGBB, #AARRGGBB or CSS/SVG colour names.\n'
    )
    parser = argparse.ArgumentParser(
        prog='vincent-palette',
        description='Build the default colour palette for a Vincent theme.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('theme', nargs='?', help='Theme JSON file (default: $VINCENT_THEME)')
        p.add_argument('-e', '--extended', help='Extra theme file appended to the extended list')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: vincent-palette help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _load_input(theme_path: str, extended_path: str | None) -> PaletteInput:
    """Read the theme (and optional extra theme) into a PaletteInput."""
    theme = parse_theme_file(theme_path)
    palette_input = PaletteInput(primary=list(theme.primary), extended=list(theme.extended))
    if extended_path:
        extra = parse_theme_file(extended_path)
        palette_input.extended.extend(extra.primary)
        palette_input.extended.extend(extra.extended)
    return palette_input


def _fail(message: str) -> NoReturn:
    print(f'Error: {message}', file=sys.stderr)
    sys.exit(1)


def _resolve_theme(args: argparse.Namespace, settings: Settings) -> str:
    theme_path = args.theme or settings.theme
    if not theme_path:
        _fail('no theme file given (pass one or set VINCENT_THEME)')
    if not os.path.isfile(theme_path):
        _fail(f'theme not found: {theme_path}')
    if args.extended and not os.path.isfile(args.extended):
        _fail(f'extended theme not found: {args.extended}')
    return theme_path


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'vincent-palette: loaded {env_path}', file=sys.stderr)
    settings = load_settings()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    theme_path = _resolve_theme(args, settings)
    try:
        palette_input = _load_input(theme_path, args.extended)
    except (ThemeError, OSError, UnicodeDecodeError) as e:
        _fail(str(e))

    supplied = len(palette_input.primary) + len(palette_input.extended)
    dropped = supplied - len(to_entries(palette_input.primary)) - len(to_entries(palette_input.extended))
    if dropped:
        print(f'vincent-palette: dropped {dropped} entries with unresolvable colours', file=sys.stderr)

    report = Report(theme_path=theme_path, extended_path=args.extended)
    cmd = registry.get(args.command)
    cmd.execute(palette_input, report, args)

    if args.json or settings.output == 'json':
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
