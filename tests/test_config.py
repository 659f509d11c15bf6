"""Tests for fielddict.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from fielddict.config import ConfigError, FieldDictConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, FieldDictConfig)
    assert config.root == tmp_path.resolve()
    assert config.object_name is None
    assert config.org is None
    assert config.repo_root is None
    assert config.include_standard is None
    assert config.workers is None
    assert config.corpora == {}


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".fielddict.yml"
    config_file.write_text(
        """
object: Opportunity
org: DevHub
repo_root: force-app/main/default
out_dir: /tmp/fielddict-out
include_standard: false
csv: true
open: "no"
dry_run: yes
workers: 4
sf_path: /usr/local/bin/sf
corpora:
  apex:
    - "src/classes/**/*.cls"
  flow: "flows/*.flow-meta.xml"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.object_name == "Opportunity"
    assert config.org == "DevHub"
    assert config.repo_root == tmp_path.resolve() / "force-app" / "main" / "default"
    assert config.out_dir == Path("/tmp/fielddict-out")
    assert config.include_standard is False
    assert config.export_csv is True
    assert config.open_output is False
    assert config.dry_run is True
    assert config.workers == 4
    assert config.sf_path == "/usr/local/bin/sf"
    assert config.corpora == {
        "apex": ["src/classes/**/*.cls"],
        "flow": ["flows/*.flow-meta.xml"],
    }


def test_load_config_accepts_directory_or_file(tmp_path: Path) -> None:
    (tmp_path / ".fielddict.yml").write_text("object: Account\n", encoding="utf-8")

    assert load_config(tmp_path).object_name == "Account"
    assert load_config(tmp_path / ".fielddict.yml").object_name == "Account"


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".fielddict.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).object_name is None


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    (tmp_path / ".fielddict.yml").write_text("- Case\n- Account\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_yaml_is_rejected(tmp_path: Path) -> None:
    (tmp_path / ".fielddict.yml").write_text("object: [unterminated\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)
    assert ".fielddict.yml" in str(excinfo.value)


def test_non_positive_workers_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".fielddict.yml").write_text("workers: 0\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
