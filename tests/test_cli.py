"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from fielddict import cli as cli_module
from fielddict.cli import _build_options, _build_parser
from fielddict.config import FieldDictConfig


def test_cli_defaults_leave_config_values_in_charge(tmp_path: Path) -> None:
    args = _build_parser().parse_args([])
    config = FieldDictConfig(
        root=tmp_path,
        object_name="Account",
        org="DevHub",
        include_standard=False,
        export_csv=True,
        open_output=False,
        workers=3,
        corpora={"apex": ["src/**/*.cls"]},
    )

    options = _build_options(args, config)

    assert options.object_name == "Account"
    assert options.org == "DevHub"
    assert options.include_standard is False
    assert options.export_csv is True
    assert options.open_output is False
    assert options.workers == 3
    assert options.corpus_overrides == {"apex": ["src/**/*.cls"]}


def test_cli_flags_override_config(tmp_path: Path) -> None:
    args = _build_parser().parse_args(
        [
            "-o",
            "Opportunity",
            "-g",
            "Sandbox",
            "-r",
            "repo/force-app/main/default",
            "--include-standard",
            "--csv",
            "--no-open",
            "--dry-run",
            "--workers",
            "2",
        ]
    )
    config = FieldDictConfig(root=tmp_path, object_name="Account", include_standard=False)

    options = _build_options(args, config)

    assert options.object_name == "Opportunity"
    assert options.org == "Sandbox"
    assert options.repo_root == Path("repo/force-app/main/default")
    assert options.include_standard is True
    assert options.export_csv is True
    assert options.open_output is False
    assert options.dry_run is True
    assert options.workers == 2


def test_builtin_defaults(tmp_path: Path) -> None:
    options = _build_options(_build_parser().parse_args([]), FieldDictConfig(root=tmp_path))

    assert options.object_name == "Case"
    assert options.org is None
    assert options.include_standard is True
    assert options.export_csv is False
    assert options.open_output is True
    assert options.dry_run is False
    assert options.workers == 1


def test_no_include_standard_flag() -> None:
    args = _build_parser().parse_args(["--no-include-standard"])
    assert args.include_standard is False


def test_main_exits_with_message_on_missing_fields(tmp_path: Path, capsys) -> None:
    repo_root = tmp_path / "force-app" / "main" / "default"
    repo_root.mkdir(parents=True)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(
            [
                "--config",
                str(tmp_path),
                "-r",
                str(repo_root),
                "-d",
                str(tmp_path / "out"),
                "--no-open",
            ]
        )

    assert excinfo.value.code == 1
    assert "Fields folder not found" in capsys.readouterr().err
