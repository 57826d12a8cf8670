"""Tests for the list-demo.py script."""

from __future__ import annotations

import runpy
from pathlib import Path

DEMO = Path(__file__).parent.parent / "list-demo.py"


def test_demo_output(capsys) -> None:
    """The demo prints the comparisons, then [3, 1] forwards and reversed."""
    runpy.run_path(str(DEMO), run_name="__main__")
    out = capsys.readouterr().out
    assert out.splitlines() == ["Comparisons:", "True, False", "3", "1", "1", "3"]
