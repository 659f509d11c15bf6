"""Core data models shared across fielddict components."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

TextCorpus = Mapping[str, str]

RESULT_COLUMNS: Tuple[str, ...] = (
    "FieldName",
    "FieldLabel",
    "Description",
    "FieldType",
    "Formula",
    "FieldLength",
    "LookupRef",
    "Required",
    "HistoryTracking",
    "PicklistValues",
    "ControllingField",
    "LastModifiedDate",
    "Layouts",
    "Flexipages",
    "RecordTypes",
    "References",
    "ProfilesAndPermSets",
)

USAGE_SEPARATOR = "; "
REFERENCE_SEPARATOR = ";\n"
CUSTOM_FIELD_SUFFIX = "__c"

_EMPTY_CORPUS: TextCorpus = MappingProxyType({})


@dataclass(frozen=True)
class FieldDescriptor:
    """Normalized static definition of one field."""

    name: str
    label: str = ""
    description: str = ""
    data_type: str = ""
    formula: str = ""
    length: str = ""
    lookup_target: str = ""
    required: str = "FALSE"
    history_tracked: str = ""
    picklist_values: str = ""
    controlling_field: str = ""


@dataclass(frozen=True)
class RemoteField:
    """Field known only from the org's FieldDefinition inventory."""

    api_name: str
    data_type: str


@dataclass
class FieldReferences:
    """Everywhere a single field identifier was found."""

    layouts: List[str] = field(default_factory=list)
    record_types: List[str] = field(default_factory=list)
    flexipages: List[str] = field(default_factory=list)
    references: List[str] = field(default_factory=list)
    access: List[str] = field(default_factory=list)


@dataclass
class ResultRow:
    """One data dictionary row; column order follows RESULT_COLUMNS."""

    field_name: str
    field_label: str = ""
    description: str = ""
    field_type: str = ""
    formula: str = ""
    field_length: str = ""
    lookup_ref: str = ""
    required: str = "FALSE"
    history_tracking: str = ""
    picklist_values: str = ""
    controlling_field: str = ""
    last_modified_date: str = ""
    layouts: str = ""
    flexipages: str = ""
    record_types: str = ""
    references: str = ""
    profiles_and_perm_sets: str = ""

    @classmethod
    def build(
        cls,
        descriptor: FieldDescriptor,
        usage: FieldReferences,
        *,
        last_modified: str = "",
    ) -> "ResultRow":
        return cls(
            field_name=descriptor.name,
            field_label=descriptor.label,
            description=descriptor.description,
            field_type=descriptor.data_type,
            formula=descriptor.formula,
            field_length=descriptor.length,
            lookup_ref=descriptor.lookup_target,
            required=descriptor.required,
            history_tracking=descriptor.history_tracked,
            picklist_values=descriptor.picklist_values,
            controlling_field=descriptor.controlling_field,
            last_modified_date=last_modified,
            layouts=USAGE_SEPARATOR.join(usage.layouts),
            flexipages=USAGE_SEPARATOR.join(usage.flexipages),
            record_types=USAGE_SEPARATOR.join(usage.record_types),
            references=REFERENCE_SEPARATOR.join(usage.references),
            profiles_and_perm_sets=REFERENCE_SEPARATOR.join(usage.access),
        )

    def as_dict(self) -> Dict[str, str]:
        """Return the row keyed by export column name, in column order."""
        values = (
            self.field_name,
            self.field_label,
            self.description,
            self.field_type,
            self.formula,
            self.field_length,
            self.lookup_ref,
            self.required,
            self.history_tracking,
            self.picklist_values,
            self.controlling_field,
            self.last_modified_date,
            self.layouts,
            self.flexipages,
            self.record_types,
            self.references,
            self.profiles_and_perm_sets,
        )
        return dict(zip(RESULT_COLUMNS, values))

    def as_list(self) -> List[str]:
        return list(self.as_dict().values())


@dataclass(frozen=True)
class CorpusSet:
    """Read-only text corpora keyed by category name."""

    corpora: Mapping[str, TextCorpus] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, corpora: Mapping[str, Mapping[str, str]]) -> "CorpusSet":
        frozen = {
            name: MappingProxyType(dict(content)) for name, content in corpora.items()
        }
        return cls(corpora=MappingProxyType(frozen))

    def get(self, category: str) -> TextCorpus:
        return self.corpora.get(category, _EMPTY_CORPUS)

    def sizes(self) -> Dict[str, int]:
        return {name: len(content) for name, content in self.corpora.items()}


__all__ = [
    "CUSTOM_FIELD_SUFFIX",
    "CorpusSet",
    "FieldDescriptor",
    "FieldReferences",
    "REFERENCE_SEPARATOR",
    "RESULT_COLUMNS",
    "RemoteField",
    "ResultRow",
    "TextCorpus",
    "USAGE_SEPARATOR",
]
