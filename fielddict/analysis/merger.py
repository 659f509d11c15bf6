"""Merging of remotely enumerated fields into the local result set."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..logging import get_logger
from ..models import CorpusSet, FieldDescriptor, RemoteField, ResultRow
from .references import collect_references

logger = get_logger("merger")


def merge_remote_fields(
    rows: Sequence[ResultRow],
    remote_fields: Iterable[RemoteField],
    corpora: CorpusSet,
) -> List[ResultRow]:
    """Append rows for remote fields not already present in ``rows``.

    Local rows always win: a remote field whose API name matches an existing
    FieldName (case-insensitive) contributes nothing. Remote rows carry only
    the data type plus usage computed from the corpora.
    """
    merged = list(rows)
    known = {row.field_name.lower() for row in merged}

    added = 0
    for remote in remote_fields:
        name = remote.api_name.strip()
        if not name or name.lower() in known:
            continue
        descriptor = FieldDescriptor(name=name, data_type=remote.data_type)
        merged.append(ResultRow.build(descriptor, collect_references(name, corpora)))
        known.add(name.lower())
        added += 1

    logger.debug("Merged %d remote fields into %d local rows", added, len(rows))
    return merged


__all__ = ["merge_remote_fields"]
