"""CLI entrypoint for fielddict."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

from .config import ConfigError, FieldDictConfig, load_config
from .logging import configure_logging
from .orchestrator import DEFAULT_OBJECT, Orchestrator, RunOptions
from .sf import SalesforceCLI


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fielddict",
        description="Build a field-level data dictionary for a Salesforce object.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .fielddict.yml or the directory containing it (defaults to current directory).",
    )
    parser.add_argument("--log-file", help="Also write logs to this file.")
    parser.add_argument("-o", "--object", dest="object_name", help="SObject API name (default: Case).")
    parser.add_argument("-g", "--org", help="Salesforce org alias used for Tooling API queries.")
    parser.add_argument(
        "-d",
        "--out-dir",
        help="Base output directory (defaults to the home directory).",
    )
    parser.add_argument(
        "-r",
        "--repo-root",
        help="Path to the metadata root (e.g. .../force-app/main/default).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Skip the LastModified query and reuse a cached LastModified CSV if present.",
    )
    parser.add_argument(
        "--include-standard",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include standard fields from the Tooling API FieldDefinition inventory.",
    )
    parser.add_argument(
        "--csv",
        dest="export_csv",
        action="store_true",
        default=None,
        help="Also export a CSV alongside the Excel file.",
    )
    parser.add_argument(
        "--no-open",
        dest="open_output",
        action="store_false",
        default=None,
        help="Do not open the Excel file automatically.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of threads used to resolve field references.",
    )
    return parser


def _pick(cli_value: Any, config_value: Any, default: Any) -> Any:
    if cli_value is not None:
        return cli_value
    if config_value is not None:
        return config_value
    return default


def _build_options(args: argparse.Namespace, config: FieldDictConfig) -> RunOptions:
    out_dir: Optional[Path] = Path(args.out_dir) if args.out_dir else config.out_dir
    repo_root: Optional[Path] = Path(args.repo_root) if args.repo_root else config.repo_root
    workers = _pick(args.workers, config.workers, 1)
    if workers < 1:
        raise ConfigError("--workers must be a positive integer")
    return RunOptions(
        object_name=_pick(args.object_name, config.object_name, DEFAULT_OBJECT),
        org=_pick(args.org, config.org, None),
        out_dir=out_dir,
        repo_root=repo_root,
        include_standard=_pick(args.include_standard, config.include_standard, True),
        export_csv=_pick(args.export_csv, config.export_csv, False),
        open_output=_pick(args.open_output, config.open_output, True),
        dry_run=_pick(args.dry_run, config.dry_run, False),
        workers=workers,
        corpus_overrides=dict(config.corpora),
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for fielddict."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    try:
        config = load_config(Path(args.config))
        options = _build_options(args, config)
        orchestrator = Orchestrator(sf_cli=SalesforceCLI(config.sf_path))
        outcome = orchestrator.run(options)
    except (ConfigError, ValueError) as exc:
        parser.exit(1, f"Error: {exc}\n")
    except Exception as exc:  # pragma: no cover
        parser.exit(1, f"fielddict failed: {exc}\nRun with --verbose for more details.\n")

    print(f"Excel written to {_relativize(outcome.excel_path)}")
    if outcome.csv_path is not None:
        print(f"CSV written to {_relativize(outcome.csv_path)}")


def _relativize(path: Optional[Path]) -> str:
    if path is None:
        return ""
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
