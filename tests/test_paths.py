"""Tests for fielddict.paths."""

from __future__ import annotations

from pathlib import Path

from fielddict.paths import resolve_paths


def test_resolve_paths_defaults_repo_under_out_dir(tmp_path: Path) -> None:
    paths = resolve_paths("Case", tmp_path)

    assert paths.repo_root == tmp_path / "force-app" / "main" / "default"
    assert paths.fields_dir == paths.repo_root / "objects" / "Case" / "fields"
    assert paths.excel_output == tmp_path / "Case_Field_Analysis.xlsx"
    assert paths.csv_output == tmp_path / "Case_Field_Analysis.csv"
    assert paths.last_modified_cache == tmp_path / "Case_LastModified.csv"


def test_resolve_paths_honours_repo_root(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    paths = resolve_paths("Account", tmp_path / "out", repo)

    assert paths.object_dir == repo / "objects" / "Account"
    assert paths.out_dir == tmp_path / "out"


def test_resolve_paths_defaults_to_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert resolve_paths("Case").out_dir == tmp_path
