"""Metadata categories scanned for field usage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

LAYOUTS = "layouts"
RECORD_TYPES = "record_types"
FLEXIPAGES = "flexipages"
REFERENCES = "references"
ACCESS = "access"


@dataclass(frozen=True)
class CorpusCategory:
    """A named bucket of artifacts and the glob patterns that load it.

    Patterns are relative to the metadata repo root; ``{object}`` is replaced
    with the object API name.
    """

    name: str
    label: str
    group: str
    patterns: Sequence[str]

    def resolve_patterns(self, object_name: str) -> Tuple[str, ...]:
        return tuple(pattern.replace("{object}", object_name) for pattern in self.patterns)


# Order matters: labelled references are reported in this sequence.
CORPUS_CATEGORIES: Tuple[CorpusCategory, ...] = (
    CorpusCategory(
        name="apex",
        label="Apex",
        group=REFERENCES,
        patterns=("classes/**/*.cls", "triggers/**/*.trigger"),
    ),
    CorpusCategory(
        name="flow",
        label="Flow",
        group=REFERENCES,
        patterns=("flows/**/*.flow-meta.xml",),
    ),
    CorpusCategory(
        name="validation_rule",
        label="ValidationRule",
        group=REFERENCES,
        patterns=("validationRules/**/*.validationRule-meta.xml",),
    ),
    CorpusCategory(
        name="duplicate_rule",
        label="DuplicateRule",
        group=REFERENCES,
        patterns=("duplicateRules/**/*.duplicateRule-meta.xml",),
    ),
    CorpusCategory(
        name="report",
        label="Report",
        group=REFERENCES,
        patterns=(
            "reports/**/*.report-meta.xml",
            "reportTypes/**/*.reportType-meta.xml",
            "reportTypes/**/*.report-meta.xml",
        ),
    ),
    CorpusCategory(
        name="email_template",
        label="EmailTemplate",
        group=REFERENCES,
        patterns=("email/**/*.email-meta.xml",),
    ),
    CorpusCategory(
        name="lwc",
        label="LWC",
        group=REFERENCES,
        patterns=("lwc/**/*.js", "lwc/**/*.html", "lwc/**/*.xml"),
    ),
    CorpusCategory(
        name="aura",
        label="Aura",
        group=REFERENCES,
        patterns=(
            "aura/**/*.cmp",
            "aura/**/*.app",
            "aura/**/*.evt",
            "aura/**/*.design",
            "aura/**/*.js",
            "aura/**/*.xml",
        ),
    ),
    CorpusCategory(
        name="layout",
        label="Layout",
        group=LAYOUTS,
        patterns=("layouts/{object}-*.layout-meta.xml",),
    ),
    CorpusCategory(
        name="record_type",
        label="RecordType",
        group=RECORD_TYPES,
        patterns=("objects/{object}/recordTypes/**/*.recordType-meta.xml",),
    ),
    CorpusCategory(
        name="flexipage",
        label="Flexipage",
        group=FLEXIPAGES,
        patterns=("flexipages/**/*.flexipage-meta.xml",),
    ),
    CorpusCategory(
        name="profile",
        label="Profile",
        group=ACCESS,
        patterns=("profiles/**/*.profile-meta.xml",),
    ),
    CorpusCategory(
        name="permission_set",
        label="PermSet",
        group=ACCESS,
        patterns=("permissionsets/**/*.permissionset-meta.xml",),
    ),
)

CATEGORIES_BY_NAME: Dict[str, CorpusCategory] = {
    category.name: category for category in CORPUS_CATEGORIES
}


def with_overrides(overrides: Dict[str, Sequence[str]]) -> Tuple[CorpusCategory, ...]:
    """Return the category registry with pattern lists replaced by ``overrides``."""
    unknown = sorted(set(overrides) - set(CATEGORIES_BY_NAME))
    if unknown:
        raise ValueError(f"Unknown corpus categories: {', '.join(unknown)}")
    return tuple(
        CorpusCategory(
            name=category.name,
            label=category.label,
            group=category.group,
            patterns=tuple(overrides.get(category.name, category.patterns)),
        )
        for category in CORPUS_CATEGORIES
    )


__all__ = [
    "ACCESS",
    "CATEGORIES_BY_NAME",
    "CORPUS_CATEGORIES",
    "CorpusCategory",
    "FLEXIPAGES",
    "LAYOUTS",
    "RECORD_TYPES",
    "REFERENCES",
    "with_overrides",
]
