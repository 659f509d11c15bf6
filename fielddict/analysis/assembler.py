"""Builds result rows for every locally declared field of an object."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from ..loaders.fields import discover_field_documents
from ..logging import get_logger
from ..models import CUSTOM_FIELD_SUFFIX, CorpusSet, ResultRow
from .descriptor import FieldDocumentError, parse_field_file
from .references import collect_references


def lookup_last_modified(index: Mapping[str, str], field_name: str) -> str:
    """Return the LastModifiedDate for ``field_name`` or an empty string.

    Keys of ``index`` are lower-cased developer names. The identifier with the
    custom field suffix appended is tried when the plain name is missing.
    """
    if not field_name:
        return ""
    key = field_name.lower()
    if key in index:
        return index[key]
    return index.get(f"{field_name}{CUSTOM_FIELD_SUFFIX}".lower(), "")


class FieldAssembler:
    """Parses field documents and attaches usage data to each of them."""

    def __init__(self, workers: int = 1) -> None:
        if workers < 1:
            raise ValueError("workers must be at least 1")
        self.workers = workers
        self.logger = get_logger("assembler")

    def assemble(
        self,
        fields_path: Path,
        corpora: CorpusSet,
        last_modified: Optional[Mapping[str, str]] = None,
    ) -> List[ResultRow]:
        """Return one row per field document found under ``fields_path``."""
        documents = discover_field_documents(fields_path)
        return self.assemble_documents(documents, corpora, last_modified)

    def assemble_documents(
        self,
        documents: Sequence[Path],
        corpora: CorpusSet,
        last_modified: Optional[Mapping[str, str]] = None,
    ) -> List[ResultRow]:
        index = last_modified or {}

        def _process(path: Path) -> Optional[ResultRow]:
            return self._process_document(path, corpora, index)

        if self.workers > 1 and len(documents) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                processed = list(pool.map(_process, documents))
        else:
            processed = [_process(path) for path in documents]

        rows = [row for row in processed if row is not None]
        skipped = len(documents) - len(rows)
        if skipped:
            self.logger.warning("Skipped %d unreadable field documents", skipped)
        self.logger.debug("Assembled %d rows from %d documents", len(rows), len(documents))
        return rows

    def _process_document(
        self,
        path: Path,
        corpora: CorpusSet,
        last_modified: Mapping[str, str],
    ) -> Optional[ResultRow]:
        try:
            descriptor = parse_field_file(path)
        except FieldDocumentError as exc:
            self.logger.warning("Skipping %s: %s", path.name, exc)
            return None
        except OSError as exc:
            self.logger.warning("Unable to read %s: %s", path, exc)
            return None

        usage = collect_references(descriptor.name, corpora)
        return ResultRow.build(
            descriptor,
            usage,
            last_modified=lookup_last_modified(last_modified, descriptor.name),
        )


__all__ = ["FieldAssembler", "lookup_last_modified"]
