"""Tests for demo console output and logging markers ([•], [!], [✓]).

These tests assert that:
- The demo prints both maps and the reference statistics
- Failures are reported with the error marker instead of raising
- Search diagnostics only appear when DEBUG_TACTICAL_SEARCH is set
"""

from __future__ import annotations

import contextlib
import io

import pytest

from tacpath.config import Config
from tacpath.demo import main
from tacpath.scenario import reference_scenario
from tacpath.search import tactical_astar


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.setenv("TACPATH_NO_COLOR", "1")
    monkeypatch.delenv("DEBUG_TACTICAL_SEARCH", raising=False)


def _run(argv):
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        code = main(argv)
    return code, buf.getvalue()


def test_demo_prints_reference_statistics():
    code, out = _run([])

    assert code == 0
    assert "=== MAP BEFORE SEARCH ===" in out
    assert "=== MAP WITH PATH ===" in out
    assert "Path length : 16" in out
    assert "Danger sum  : 0.89" in out
    assert "[✓] Route cost" in out
    assert "\033[" not in out


def test_demo_reports_invalid_endpoint():
    code, out = _run(["--start", "2", "3"])

    assert code == 2
    assert "[!] Cannot plan route" in out
    assert "=== MAP WITH PATH ===" not in out


def test_demo_rejects_invalid_weights():
    code, out = _run(["--cover-weight", "1.5"])

    assert code == 2
    assert "[!] Invalid search weights" in out


def test_demo_accepts_weight_overrides():
    code, out = _run(["--danger-weight", "0", "--no-cover"])

    assert code == 0
    # Danger is free, so the route is a plain shortest path
    assert "Path length : 16" in out
    assert "danger_weight=0.0" in out


def test_search_debug_tag(monkeypatch):
    scenario = reference_scenario()
    grid = scenario.build_grid()

    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        tactical_astar(grid, scenario.start, scenario.goal)
    assert buf.getvalue() == ""

    monkeypatch.setenv("DEBUG_TACTICAL_SEARCH", "1")
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        tactical_astar(grid, scenario.start, scenario.goal)
    assert "[•] [Search] (1, 1) -> (10, 8): 16 steps" in buf.getvalue()


def test_demo_rejects_invalid_configuration(monkeypatch):
    monkeypatch.setattr(Config, "COVER_WEIGHT", 1.2)

    code, out = _run([])

    assert code == 2
    assert "[!] Invalid configuration" in out
    assert "=== MAP BEFORE SEARCH ===" not in out
