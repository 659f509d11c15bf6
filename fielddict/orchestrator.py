"""Pipeline orchestration for a single object analysis."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from .analysis import FieldAssembler, merge_remote_fields
from .exporters import export_to_csv, export_to_excel
from .loaders import CORPUS_CATEGORIES, discover_field_documents, load_corpora, with_overrides
from .logging import get_logger, object_context
from .models import CorpusSet, RemoteField, ResultRow
from .opener import open_file
from .paths import RunPaths, resolve_paths
from .sf import SalesforceCLI, SalesforceCLIError, fetch_field_definitions, fetch_last_modified

DEFAULT_OBJECT = "Case"


@dataclass
class RunOptions:
    """Effective settings for one analysis run."""

    object_name: str = DEFAULT_OBJECT
    org: Optional[str] = None
    out_dir: Optional[Path] = None
    repo_root: Optional[Path] = None
    include_standard: bool = True
    export_csv: bool = False
    open_output: bool = True
    dry_run: bool = False
    workers: int = 1
    write_cache: bool = True
    corpus_overrides: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class RunOutcome:
    """Rows produced by a run and the files written for them."""

    rows: List[ResultRow]
    excel_path: Optional[Path] = None
    csv_path: Optional[Path] = None


class Orchestrator:
    """Coordinates discovery, corpus loading, resolution, merging and export."""

    def __init__(
        self,
        sf_cli: SalesforceCLI | None = None,
        opener: Callable[[Path], bool] | None = None,
    ) -> None:
        self.sf_cli = sf_cli or SalesforceCLI()
        self._opener = opener or open_file
        self.logger = get_logger("orchestrator")

    def run(self, options: RunOptions) -> RunOutcome:
        """Analyze the object, write the workbook (and CSV) and optionally open it."""
        paths = resolve_paths(options.object_name, options.out_dir, options.repo_root)
        self.logger.info("Analyzing fields for object: %s", options.object_name)
        self.logger.info("Repo path: %s", paths.repo_root)
        self.logger.info("Output Excel: %s", paths.excel_output)

        rows = self.analyze(options, paths=paths)

        self.logger.info("Processing complete. %d rows generated. Exporting...", len(rows))
        paths.out_dir.mkdir(parents=True, exist_ok=True)
        outcome = RunOutcome(rows=rows)
        with object_context(options.object_name):
            outcome.excel_path = export_to_excel(rows, options.object_name, paths.excel_output)
            if options.export_csv:
                outcome.csv_path = export_to_csv(rows, paths.csv_output)
        if options.open_output:
            self._opener(outcome.excel_path)
        return outcome

    def analyze(self, options: RunOptions, *, paths: RunPaths | None = None) -> List[ResultRow]:
        """Return the merged result rows without writing any output files.

        The only file this may write is the LastModified cache, and only when
        ``options.write_cache`` is set.
        """
        paths = paths or resolve_paths(options.object_name, options.out_dir, options.repo_root)
        with object_context(options.object_name):
            return self._analyze(options, paths)

    def _analyze(self, options: RunOptions, paths: RunPaths) -> List[ResultRow]:
        # Configuration errors must surface before any remote call or corpus scan.
        documents = discover_field_documents(paths.fields_dir)

        last_modified = self._load_last_modified(options, paths)

        self.logger.info("Pre-loading metadata files into memory...")
        categories = (
            with_overrides(options.corpus_overrides)
            if options.corpus_overrides
            else CORPUS_CATEGORIES
        )
        corpora = load_corpora(paths.repo_root, options.object_name, categories)
        self.logger.info("Metadata pre-loading complete.")

        assembler = FieldAssembler(workers=options.workers)
        rows = assembler.assemble_documents(documents, corpora, last_modified)

        if options.include_standard:
            rows = self._merge_standard_fields(options, rows, corpora)
        return rows

    def _load_last_modified(self, options: RunOptions, paths: RunPaths) -> Mapping[str, str]:
        if not options.org and not options.dry_run:
            self.logger.info("No org configured; continuing without LastModified dates.")
            return {}
        try:
            return fetch_last_modified(
                self.sf_cli,
                options.org or "",
                options.object_name,
                paths.last_modified_cache,
                dry_run=options.dry_run,
                write_cache=options.write_cache,
            )
        except (SalesforceCLIError, OSError, csv.Error) as exc:
            self.logger.warning(
                "Failed to fetch LastModified dates; continuing without them. %s", exc
            )
            return {}

    def _merge_standard_fields(
        self,
        options: RunOptions,
        rows: Sequence[ResultRow],
        corpora: CorpusSet,
    ) -> List[ResultRow]:
        if not options.org:
            self.logger.warning("No org configured; skipping standard field inventory.")
            return list(rows)

        self.logger.info("Fetching FieldDefinition for standard fields...")
        try:
            definitions: List[RemoteField] = fetch_field_definitions(
                self.sf_cli, options.org, options.object_name
            )
        except (SalesforceCLIError, OSError, csv.Error) as exc:
            self.logger.warning("Failed to fetch FieldDefinition. %s", exc)
            return list(rows)

        merged = merge_remote_fields(rows, definitions, corpora)
        self.logger.info(
            "Merged %d standard fields (deduped against local metadata).",
            len(merged) - len(rows),
        )
        return merged


__all__ = ["DEFAULT_OBJECT", "Orchestrator", "RunOptions", "RunOutcome"]
