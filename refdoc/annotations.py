"""Data models for documentation annotations keyed by canonical ID."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

NO_DESCRIPTION = "_(No Description)_"


@dataclass(frozen=True)
class AnnotationRecord:
    """Parsed prose for one documented member."""

    summary: str | None = None
    returns: str | None = None
    remarks: str | None = None
    parameter_descriptions: dict[str, str] = field(default_factory=dict)
    type_parameter_descriptions: dict[str, str] = field(default_factory=dict)

    def parameter_description(self, name: str) -> str:
        """Return a parameter's description or the placeholder."""
        return self.parameter_descriptions.get(name) or NO_DESCRIPTION

    def type_parameter_description(self, name: str) -> str:
        """Return a type parameter's description or the placeholder."""
        return self.type_parameter_descriptions.get(name) or NO_DESCRIPTION


class AnnotationStore(Mapping[str, AnnotationRecord]):
    """Read-only lookup of annotation records by canonical ID."""

    def __init__(self, records: Mapping[str, AnnotationRecord] | None = None) -> None:
        """Initialize the store from an ID -> record mapping."""
        self._records = dict(records or {})

    def __getitem__(self, key: str) -> AnnotationRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def annotation_for(self, canonical_id: str) -> AnnotationRecord | None:
        """Return the record for an ID, or None when it is not documented."""
        return self._records.get(canonical_id)


def summary_of(record: AnnotationRecord | None) -> str:
    """Return the summary text of a possibly missing record."""
    if record is None or not record.summary:
        return NO_DESCRIPTION
    return record.summary
