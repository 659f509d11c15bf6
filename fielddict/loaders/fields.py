"""Discovery of field-definition documents for one object."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..config import ConfigError
from ..logging import get_logger

FIELD_DOCUMENT_PATTERN = "**/*.field-meta.xml"

logger = get_logger("loaders.fields")


class FieldsLocationNotFoundError(ConfigError):
    """Raised when the object's fields directory does not exist."""


class NoFieldDocumentsError(ConfigError):
    """Raised when the fields directory holds no field-definition documents."""


def discover_field_documents(fields_path: Path) -> List[Path]:
    """Return the field-definition documents under ``fields_path`` in sorted order."""
    if not fields_path.is_dir():
        object_dir = fields_path.parent
        raise FieldsLocationNotFoundError(
            f"Fields folder not found: {fields_path}.\n"
            f"Check the repo root is correct and that '{object_dir.name}' exists under "
            f"'{object_dir.parent}'."
        )

    documents = sorted(
        (path for path in fields_path.glob(FIELD_DOCUMENT_PATTERN) if path.is_file()),
        key=lambda path: path.relative_to(fields_path).as_posix(),
    )
    logger.info(
        "Discovered %d field files using pattern %s/%s",
        len(documents),
        fields_path.as_posix(),
        FIELD_DOCUMENT_PATTERN,
    )
    if not documents:
        raise NoFieldDocumentsError(
            f"No field metadata files found for object at: {fields_path}.\n"
            "Verify the object API name and the repo root "
            "(try --repo-root \".../force-app/main/default\")."
        )
    return documents


__all__ = [
    "FIELD_DOCUMENT_PATTERN",
    "FieldsLocationNotFoundError",
    "NoFieldDocumentsError",
    "discover_field_documents",
]
