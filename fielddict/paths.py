"""Resolution of input and output locations for a run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunPaths:
    """Filesystem locations used by a single object analysis."""

    out_dir: Path
    repo_root: Path
    object_dir: Path
    fields_dir: Path
    excel_output: Path
    csv_output: Path
    last_modified_cache: Path


def resolve_paths(
    object_name: str,
    out_dir: Path | str | None = None,
    repo_root: Path | str | None = None,
) -> RunPaths:
    """Derive every run location from the object name and optional roots.

    The output directory defaults to the home directory and the metadata root
    to ``<out_dir>/force-app/main/default``.
    """
    out_path = Path(out_dir).expanduser() if out_dir else Path.home()
    repo_path = (
        Path(repo_root).expanduser()
        if repo_root
        else out_path / "force-app" / "main" / "default"
    )
    object_dir = repo_path / "objects" / object_name
    return RunPaths(
        out_dir=out_path,
        repo_root=repo_path,
        object_dir=object_dir,
        fields_dir=object_dir / "fields",
        excel_output=out_path / f"{object_name}_Field_Analysis.xlsx",
        csv_output=out_path / f"{object_name}_Field_Analysis.csv",
        last_modified_cache=out_path / f"{object_name}_LastModified.csv",
    )


__all__ = ["RunPaths", "resolve_paths"]
