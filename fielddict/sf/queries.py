"""Remote field enumeration through Tooling API queries."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Dict, List

from ..logging import get_logger
from ..models import CUSTOM_FIELD_SUFFIX, RemoteField
from .cli import SalesforceCLI

logger = get_logger("sf.queries")


def last_modified_query(object_name: str) -> str:
    return (
        "SELECT DeveloperName, LastModifiedDate FROM CustomField "
        f"WHERE TableEnumOrId = '{object_name}'"
    )


def field_definition_query(object_name: str) -> str:
    return (
        "SELECT QualifiedApiName, DataType FROM FieldDefinition "
        f"WHERE EntityDefinition.QualifiedApiName='{object_name}'"
    )


def _read_records(csv_text: str) -> List[Dict[str, str]]:
    reader = csv.DictReader(io.StringIO(csv_text))
    records: List[Dict[str, str]] = []
    for row in reader:
        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue
        records.append({key: (value or "") for key, value in row.items() if key})
    return records


def build_last_modified_index(csv_text: str) -> Dict[str, str]:
    """Map lower-cased developer names (plain and suffixed) to LastModifiedDate."""
    index: Dict[str, str] = {}
    records = _read_records(csv_text)
    for record in records:
        developer_name = record.get("DeveloperName", "").strip()
        last_modified = record.get("LastModifiedDate", "").strip()
        if not developer_name:
            continue
        index[developer_name.lower()] = last_modified
        index[f"{developer_name}{CUSTOM_FIELD_SUFFIX}".lower()] = last_modified
    logger.info("Fetched %d field entries for LastModifiedDate", len(records))
    return index


def parse_field_definitions(csv_text: str) -> List[RemoteField]:
    return [
        RemoteField(
            api_name=record.get("QualifiedApiName", "").strip(),
            data_type=record.get("DataType", "").strip(),
        )
        for record in _read_records(csv_text)
    ]


def fetch_last_modified(
    cli: SalesforceCLI,
    org: str,
    object_name: str,
    cache_path: Path,
    *,
    dry_run: bool = False,
    write_cache: bool = True,
) -> Dict[str, str]:
    """Query LastModifiedDate values, caching the raw CSV at ``cache_path``.

    In dry-run mode no query runs; a previously cached CSV is reused when present.
    With ``write_cache`` disabled the query result is used directly and nothing
    is written to disk.
    """
    if dry_run:
        if not cache_path.exists():
            logger.info(
                "Dry run: no cached CSV at %s; continuing without LastModified dates",
                cache_path,
            )
            return {}
        logger.info("Dry run: reusing cached CSV at %s", cache_path)
        return build_last_modified_index(cache_path.read_text(encoding="utf-8"))

    stdout = cli.query_csv(org, last_modified_query(object_name))
    if write_cache:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        cache_path.write_text(stdout, encoding="utf-8")
    return build_last_modified_index(stdout)


def fetch_field_definitions(cli: SalesforceCLI, org: str, object_name: str) -> List[RemoteField]:
    """Return the object's full field inventory as (api name, data type) pairs."""
    stdout = cli.query_csv(org, field_definition_query(object_name))
    return parse_field_definitions(stdout)


__all__ = [
    "build_last_modified_index",
    "fetch_field_definitions",
    "fetch_last_modified",
    "field_definition_query",
    "last_modified_query",
    "parse_field_definitions",
]
