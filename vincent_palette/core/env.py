"""Environment and settings loading for vincent-palette.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read from the environment afterwards:
  VINCENT_THEME   default theme file when none is given on the command line
  VINCENT_OUTPUT  'text' (default) or 'json'
"""

import os
from dataclasses import dataclass
from pathlib import Path

OUTPUT_FORMATS = ('text', 'json')


@dataclass
class Settings:
    """Resolved runtime settings."""

    theme: str | None = None
    output: str = 'text'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    theme = os.environ.get('VINCENT_THEME') or None
    output = os.environ.get('VINCENT_OUTPUT', 'text').strip().lower()
    if output not in OUTPUT_FORMATS:
        output = 'text'
    return Settings(theme=theme, output=output)
