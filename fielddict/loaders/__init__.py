"""Loaders for field documents and metadata corpora."""

from .categories import CORPUS_CATEGORIES, CorpusCategory, with_overrides
from .corpus import load_corpora, preload_text_content
from .fields import (
    FieldsLocationNotFoundError,
    NoFieldDocumentsError,
    discover_field_documents,
)

__all__ = [
    "CORPUS_CATEGORIES",
    "CorpusCategory",
    "FieldsLocationNotFoundError",
    "NoFieldDocumentsError",
    "discover_field_documents",
    "load_corpora",
    "preload_text_content",
    "with_overrides",
]
