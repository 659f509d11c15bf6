"""Field descriptor extraction and cross-reference resolution."""

from .assembler import FieldAssembler, lookup_last_modified
from .descriptor import FieldDocumentError, parse_field_document, parse_field_file
from .matchers import contains_field
from .merger import merge_remote_fields
from .references import collect_references, search_usage

__all__ = [
    "FieldAssembler",
    "FieldDocumentError",
    "collect_references",
    "contains_field",
    "lookup_last_modified",
    "merge_remote_fields",
    "parse_field_document",
    "parse_field_file",
    "search_usage",
]
