"""Extraction of field descriptors from CustomField metadata documents."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Sequence

from ..models import FieldDescriptor

ROOT_TAG = "CustomField"

_LENGTH_TYPES = {"Text", "Html", "LongTextArea"}
_PRECISION_TYPES = {"Number", "Currency"}
_LOOKUP_TYPE = "Lookup"


class FieldDocumentError(ValueError):
    """Raised when a document is not a readable CustomField definition."""


def parse_field_file(path: Path) -> FieldDescriptor:
    """Read ``path`` and return its field descriptor."""
    try:
        root = ET.fromstring(path.read_bytes())
    except ET.ParseError as exc:
        raise FieldDocumentError(f"Malformed XML in {path.name}: {exc}") from exc
    return parse_field_document(root)


def parse_field_document(root: ET.Element) -> FieldDescriptor:
    """Return the normalized descriptor for a parsed CustomField document."""
    if _local_name(root.tag) != ROOT_TAG:
        raise FieldDocumentError(
            f"Expected <{ROOT_TAG}> root element, found <{_local_name(root.tag)}>"
        )

    data_type = _read_value(root, ("type",))
    picklist_values, controlling_field = _picklist(root)
    return FieldDescriptor(
        name=_read_value(root, ("fullName",)),
        label=_read_value(root, ("label",)),
        description=_read_value(root, ("description",)),
        data_type=data_type,
        formula=_read_value(root, ("formula",)),
        length=_field_length(root, data_type),
        lookup_target=_read_value(root, ("referenceTo",)) if data_type == _LOOKUP_TYPE else "",
        required=_required(root),
        history_tracked=_read_value(root, ("trackHistory",)),
        picklist_values=picklist_values,
        controlling_field=controlling_field,
    )


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _find(element: ET.Element, path: Sequence[str]) -> Optional[ET.Element]:
    node: Optional[ET.Element] = element
    for key in path:
        if node is None:
            return None
        matches = _children(node, key)
        node = matches[0] if matches else None
    return node


def _read_value(element: ET.Element, path: Sequence[str]) -> str:
    node = _find(element, path)
    if node is None:
        return ""
    return node.text or ""


def _field_length(root: ET.Element, data_type: str) -> str:
    kind = data_type.strip()
    if kind in _LENGTH_TYPES:
        return _read_value(root, ("length",))
    if kind in _PRECISION_TYPES:
        parts = [_read_value(root, ("precision",)), _read_value(root, ("scale",))]
        return ", ".join(part for part in parts if part)
    return ""


def _required(root: ET.Element) -> str:
    return "TRUE" if _read_value(root, ("required",)).lower() == "true" else "FALSE"


def _picklist(root: ET.Element) -> tuple[str, str]:
    value_set = _find(root, ("valueSet",))
    if value_set is None:
        return "", ""

    controlling = _read_value(value_set, ("controllingField",))

    definition = _find(value_set, ("valueSetDefinition",))
    if definition is not None:
        names = [_read_value(value, ("fullName",)) for value in _children(definition, "value")]
        names = [name for name in names if name]
        if names:
            return ", ".join(names), controlling

    shared_name = _read_value(value_set, ("valueSetName",))
    if shared_name:
        return shared_name, controlling

    return "", controlling


__all__ = ["FieldDocumentError", "ROOT_TAG", "parse_field_document", "parse_field_file"]
