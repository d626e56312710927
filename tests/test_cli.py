"""Tests for the ephemeris-engine command line."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from ephemeris_engine import context as context_module
from ephemeris_engine.cli import main as cli_main
from ephemeris_engine.constants import AST_OFFSET, MARS, MEAN_NODE, SUN


@pytest.fixture(autouse=True)
def _fresh_default_context(monkeypatch: pytest.MonkeyPatch) -> None:
    """Each CLI run configures its own default context."""
    monkeypatch.setattr(context_module, '_default_context', None)


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['ephemeris-engine', *args])
    return cli_main.main()


def test_parse_body() -> None:
    assert cli_main.parse_body('mars') == MARS
    assert cli_main.parse_body('SUN') == SUN
    assert cli_main.parse_body('4') == MARS
    assert cli_main.parse_body('Mean Node') == MEAN_NODE
    assert cli_main.parse_body('ast:433') == AST_OFFSET + 433
    with pytest.raises(ValueError, match='Unknown body'):
        cli_main.parse_body('vulcan')


def test_calc_series(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(monkeypatch, 'calc', '--date', '2024-03-20T03:06:21', '--backend', 'series')
    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith('Sun at 2024-03-20 03:06:')
    assert '(series)' in out
    assert 'longitude' in out
    assert 'distance' in out


def test_calc_xyz_flags(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(
        monkeypatch,
        'calc',
        '--date',
        '2024-04-01',
        '--body',
        'mars',
        '--backend',
        'series',
        '--flags',
        'helctr',
        'xyz',
    )
    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith('Mars at 2024-04-01')
    assert '  x ' in out
    assert 'longitude' not in out


def test_unknown_body_is_a_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(monkeypatch, 'calc', '--date', '2024-04-01', '--body', 'vulcan')
    assert excinfo.value.code == 2


def test_bad_date(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(monkeypatch, 'calc', '--date', 'someday', '--backend', 'series')
    assert rc == 1
    assert 'Error:' in capsys.readouterr().err


def test_missing_files_without_fallback(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    rc = _run(
        monkeypatch,
        'calc',
        '--date',
        '2024-04-01',
        '--ephe-path',
        str(tmp_path),
        '--no-fallback',
    )
    assert rc == 1
    assert 'FileNotFoundEphemeris' in capsys.readouterr().err


def test_missing_files_fall_back(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    rc = _run(monkeypatch, 'calc', '--date', '2024-04-01', '--ephe-path', str(tmp_path))
    captured = capsys.readouterr()
    assert rc == 0
    assert 'Note:' in captured.err
    assert '(series)' in captured.out


def test_eclipse_event(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(
        monkeypatch,
        'event',
        '--date',
        '2024-03-08',
        '--kind',
        'solar-eclipse',
        '--backend',
        'series',
    )
    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith('max        2024-04-08 18:1')
    assert 'gamma' in out


def test_sunset_event(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(
        monkeypatch,
        'event',
        '--date',
        '2024-06-21',
        '--kind',
        'set',
        '--backend',
        'series',
        '--latitude',
        '51.5072',
        '--longitude',
        '-0.1276',
    )
    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith('event      2024-06-21 20:2')


def test_event_not_found(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(
        monkeypatch,
        'event',
        '--date',
        '2024-06-21',
        '--kind',
        'set',
        '--backend',
        'series',
        '--latitude',
        '78.2',
        '--longitude',
        '15.6',
    )
    assert rc == 1
    assert 'SearchNotFound' in capsys.readouterr().err
