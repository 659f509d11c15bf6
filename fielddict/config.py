"""Configuration loading for fielddict (.fielddict.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".fielddict.yml"


class ConfigError(RuntimeError):
    """Raised when the run configuration or its input locations are invalid."""


@dataclass
class FieldDictConfig:
    """Represents the settings defined in .fielddict.yml."""

    root: Path
    object_name: Optional[str] = None
    org: Optional[str] = None
    repo_root: Optional[Path] = None
    out_dir: Optional[Path] = None
    include_standard: Optional[bool] = None
    export_csv: Optional[bool] = None
    open_output: Optional[bool] = None
    dry_run: Optional[bool] = None
    workers: Optional[int] = None
    sf_path: Optional[str] = None
    corpora: Dict[str, List[str]] = field(default_factory=dict)


def load_config(config_path: Path) -> FieldDictConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return FieldDictConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    corpora: Dict[str, List[str]] = {}
    for name, patterns in _as_dict(data.get("corpora")).items():
        values = _as_str_list(patterns)
        if values:
            corpora[str(name)] = values

    workers = _as_int(data.get("workers"))
    if workers is not None and workers < 1:
        raise ConfigError("workers must be a positive integer")

    return FieldDictConfig(
        root=root,
        object_name=_as_str(data.get("object")),
        org=_as_str(data.get("org")),
        repo_root=_as_path(root, data.get("repo_root")),
        out_dir=_as_path(root, data.get("out_dir")),
        include_standard=_as_bool(data.get("include_standard")),
        export_csv=_as_bool(data.get("csv")),
        open_output=_as_bool(data.get("open")),
        dry_run=_as_bool(data.get("dry_run")),
        workers=workers,
        sf_path=_as_str(data.get("sf_path")),
        corpora=corpora,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_path(root: Path, value: Any) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else (root / path)


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "FieldDictConfig", "load_config"]
