from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parents[1]


def test_project_metadata_points_at_real_files():
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    assert project["name"] == "schooladmin"
    readme = project.get("readme")
    if readme is not None:
        assert (ROOT / readme).is_file()
        assert readme.lower().startswith("readme")
