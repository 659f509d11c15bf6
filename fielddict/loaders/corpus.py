"""Preloading of metadata text corpora."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from ..logging import get_logger
from ..models import CorpusSet
from .categories import CORPUS_CATEGORIES, CorpusCategory

logger = get_logger("loaders.corpus")


def expand_patterns(root: Path, patterns: Iterable[str]) -> List[Path]:
    """Return the files matched by ``patterns`` under ``root``, sorted by relative path."""
    seen: Dict[str, Path] = {}
    for pattern in patterns:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            rel_path = path.relative_to(root).as_posix()
            seen.setdefault(rel_path, path)
    return [seen[key] for key in sorted(seen)]


def preload_text_content(root: Path, patterns: Sequence[str]) -> Dict[str, str]:
    """Read every matched file into memory keyed by file name.

    A file whose name was already taken by an earlier match is keyed by its
    repo-relative path instead, so no artifact is dropped.
    """
    content: Dict[str, str] = {}
    for path in expand_patterns(root, patterns):
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Skipping unreadable file %s: %s", path, exc)
            continue
        key = path.name
        if key in content:
            key = path.relative_to(root).as_posix()
        content[key] = text
    logger.debug(
        "Preloaded %d files for patterns: %s", len(content), ", ".join(patterns)
    )
    return content


def load_corpora(
    repo_root: Path,
    object_name: str,
    categories: Sequence[CorpusCategory] = CORPUS_CATEGORIES,
) -> CorpusSet:
    """Load every category corpus once; the result is read-only."""
    loaded: Dict[str, Dict[str, str]] = {}
    if not repo_root.is_dir():
        logger.warning("Metadata root %s not found; corpora will be empty", repo_root)
        return CorpusSet.from_mapping({category.name: {} for category in categories})

    for category in categories:
        loaded[category.name] = preload_text_content(
            repo_root, category.resolve_patterns(object_name)
        )
    corpora = CorpusSet.from_mapping(loaded)
    logger.info(
        "Loaded %d metadata files across %d categories",
        sum(corpora.sizes().values()),
        len(loaded),
    )
    return corpora


__all__ = ["expand_patterns", "load_corpora", "preload_text_content"]
