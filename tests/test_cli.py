"""End-to-end tests for the vincent-palette CLI and command registry."""

import importlib
import json
import shutil
import sys
from pathlib import Path

import pytest
from vincent_palette import registry
from vincent_palette.__main__ import main
from vincent_palette.core.palette import build_default_palette
from vincent_palette.core.theme import parse_theme_file
from vincent_palette.core.types import Command, PaletteInput, Report

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
SAMPLE_THEME = FIXTURES_DIR / 'theme.json'

# Expected build order for fixtures/theme.json
SAMPLE_ORDER = ['Ink', 'Slate', 'Signal', 'Leaf', 'Sky', 'Mist', 'Paper']


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated cwd with a .git boundary so no stray .env is picked up."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for key in ('VINCENT_THEME', 'VINCENT_OUTPUT'):
        # load_env writes os.environ directly; register the key so teardown removes it
        monkeypatch.setenv(key, '')
        monkeypatch.delenv(key)
    shutil.copy(SAMPLE_THEME, tmp_path / 'theme.json')
    return tmp_path


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> None:
    monkeypatch.setattr(sys, 'argv', ['vincent-palette', *argv])
    main()


class TestRegistry:
    def test_discovers_all_commands(self):
        assert set(registry.discover()) == {'build', 'classify', 'merge'}

    def test_commands_come_from_documented_modules(self):
        for name, cmd in registry.discover().items():
            module = importlib.import_module(f'vincent_palette.commands.{name}')
            assert module.command is cmd
            assert (module.__doc__ or '').strip()

    def test_get_unknown(self):
        with pytest.raises(KeyError, match='Available'):
            registry.get('nope')

    def test_command_without_run(self):
        with pytest.raises(RuntimeError):
            Command(name='empty').execute(PaletteInput(), Report(), None)


class TestBuild:
    def test_json_order(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        _run(monkeypatch, 'build', 'theme.json', '--json')
        obj = json.loads(capsys.readouterr().out)
        assert [row['name'] for row in obj['palette']] == SAMPLE_ORDER
        assert obj['summary'] == {'input': 10, 'output': 7}

    def test_matches_library_palette(
        self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        _run(monkeypatch, 'build', 'theme.json', '--json')
        rows = json.loads(capsys.readouterr().out)['palette']
        theme = parse_theme_file(str(SAMPLE_THEME))
        expected = build_default_palette(theme.primary, theme.extended)
        assert [(r['name'], r['color']) for r in rows] == [(e.name, e.color.name()) for e in expected]

    def test_groups(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        _run(monkeypatch, 'build', 'theme.json', '-j')
        groups = [row['group'] for row in json.loads(capsys.readouterr().out)['palette']]
        assert groups == ['dark', 'dark', 'colored', 'colored', 'colored', 'light', 'light']

    def test_text_output(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        _run(monkeypatch, 'build', 'theme.json')
        captured = capsys.readouterr()
        assert captured.out.startswith('vincent-palette: theme.json')
        assert '[colored]' in captured.out
        assert 'dropped 2 entries' in captured.err

    def test_extended_file(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        extra = workdir / 'extra.json'
        extra.write_text(json.dumps([{'name': 'Ink copy', 'color': '#000'}, {'name': 'Gold', 'color': 'gold'}]))
        _run(monkeypatch, 'build', 'theme.json', '--extended', str(extra), '--json')
        names = [row['name'] for row in json.loads(capsys.readouterr().out)['palette']]
        assert 'Ink copy' not in names
        assert names.index('Signal') < names.index('Gold') < names.index('Leaf')

    def test_theme_from_env(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        monkeypatch.setenv('VINCENT_THEME', str(workdir / 'theme.json'))
        monkeypatch.setenv('VINCENT_OUTPUT', 'json')
        _run(monkeypatch, 'build')
        obj = json.loads(capsys.readouterr().out)
        assert len(obj['palette']) == 7

    def test_theme_from_dotenv(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        (workdir / '.env').write_text('VINCENT_THEME=theme.json\nVINCENT_OUTPUT=json\n')
        _run(monkeypatch, 'build')
        captured = capsys.readouterr()
        assert 'loaded' in captured.err
        assert len(json.loads(captured.out)['palette']) == 7


class TestClassifyAndMerge:
    def test_classify_merge_order(
        self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        _run(monkeypatch, 'classify', 'theme.json', '--json')
        obj = json.loads(capsys.readouterr().out)
        names = [row['name'] for row in obj['classified']]
        assert names == ['Paper', 'Ink', 'Signal', 'Sky', 'Leaf', 'Slate', 'Mist']
        assert obj['summary'] == {'merged': 7, 'neutral': 4, 'colored': 3}

    def test_merge_counts(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        _run(monkeypatch, 'merge', 'theme.json', '--json')
        obj = json.loads(capsys.readouterr().out)
        assert obj['summary'] == {'input': 10, 'valid': 8, 'invalid': 2, 'duplicates': 1}
        assert obj['merged'][2] == {'name': 'Signal', 'color': '#ff0000'}


class TestErrors:
    def test_no_command(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch)
        assert exc.value.code == 1

    def test_missing_theme(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, 'build', 'missing.json')
        assert exc.value.code == 1
        assert 'theme not found' in capsys.readouterr().err

    def test_no_theme_at_all(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit):
            _run(monkeypatch, 'build')
        assert 'VINCENT_THEME' in capsys.readouterr().err

    def test_invalid_theme(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        (workdir / 'bad.json').write_text('{broken')
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, 'build', 'bad.json')
        assert exc.value.code == 1
        assert 'Invalid theme JSON' in capsys.readouterr().err


class TestHelp:
    def test_lists_commands(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        _run(monkeypatch, 'help')
        out = capsys.readouterr().out
        for name in ('build', 'classify', 'merge'):
            assert name in out

    def test_command_docs(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        _run(monkeypatch, 'help', 'build')
        assert 'dark neutrals' in capsys.readouterr().out

    def test_unknown_topic(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        with pytest.raises(SystemExit):
            _run(monkeypatch, 'help', 'nope')
