from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_project_metadata() -> None:
    project = tomllib.loads(PYPROJECT.read_text(encoding="utf8"))["project"]
    assert project["name"] == "densematrix"
    assert "readme" not in project
    assert project["scripts"]["densematrix"] == "densematrix_cli.cli:main"
    assert {"typer>=0.9", "rich>=13"} <= set(project["dependencies"])
