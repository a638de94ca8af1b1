"""Data types for records and per-data-source record summaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FocusRecordId:
    """A record an explanation focuses on.

    The data source code is upper-cased and both parts are stripped.
    """

    data_source: str | None
    record_id: str | None

    def __post_init__(self) -> None:
        if self.data_source is not None:
            object.__setattr__(self, "data_source", self.data_source.upper().strip())
        if self.record_id is not None:
            object.__setattr__(self, "record_id", self.record_id.strip())


@dataclass(frozen=True)
class MatchedRecord:
    """A record together with how it matched its entity."""

    data_source: str | None
    record_id: str | None
    match_key: str | None = None
    match_level: int | None = None
    match_score: int | None = None
    ref_score: int | None = None
    resolution_rule_code: str | None = None


@dataclass(frozen=True)
class DataSourceRecordSummary:
    """How many records an entity has from one data source.

    ``top_record_ids`` is a sorted, bounded sample; ``record_count`` is
    always the full count.
    """

    data_source: str | None
    record_count: int = 0
    top_record_ids: tuple[str, ...] = ()
