"""Cross-reference collection across metadata corpora."""

from __future__ import annotations

from typing import List

from ..loaders.categories import ACCESS, CORPUS_CATEGORIES, REFERENCES, CorpusCategory
from ..models import CorpusSet, FieldReferences, TextCorpus
from .matchers import contains_field


def search_usage(corpus: TextCorpus, identifier: str) -> List[str]:
    """Return every artifact identifier whose text mentions ``identifier``."""
    return [name for name, text in corpus.items() if contains_field(text, identifier)]


def collect_references(identifier: str, corpora: CorpusSet) -> FieldReferences:
    """Scan every corpus for ``identifier`` and group the hits by usage kind."""
    usage = FieldReferences(
        layouts=search_usage(corpora.get("layout"), identifier),
        record_types=search_usage(corpora.get("record_type"), identifier),
        flexipages=search_usage(corpora.get("flexipage"), identifier),
    )
    for category in CORPUS_CATEGORIES:
        if category.group == REFERENCES:
            usage.references.extend(_labelled(category, corpora, identifier))
        elif category.group == ACCESS:
            usage.access.extend(_labelled(category, corpora, identifier))
    return usage


def _labelled(category: CorpusCategory, corpora: CorpusSet, identifier: str) -> List[str]:
    return [
        f"{category.label}: {name}"
        for name in search_usage(corpora.get(category.name), identifier)
    ]


__all__ = ["collect_references", "search_usage"]
