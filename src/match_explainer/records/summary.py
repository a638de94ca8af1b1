"""Record parsing and per-data-source record summaries."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from match_explainer.core.exceptions import MissingTelemetryError, TelemetryError
from match_explainer.core.fields import get_int, get_str
from match_explainer.records.types import (
    DataSourceRecordSummary,
    FocusRecordId,
    MatchedRecord,
)

logger = logging.getLogger(__name__)

TOP_RECORD_COUNT = 10


def parse_focus_record_id(obj: Mapping[str, Any]) -> FocusRecordId:
    return FocusRecordId(get_str(obj, "DATA_SOURCE"), get_str(obj, "RECORD_ID"))


def parse_matched_record(obj: Mapping[str, Any]) -> MatchedRecord:
    """Parse a record entry of an entity.

    ``MATCH_SCORE`` arrives either as a number or as a string; a blank
    string means no score.
    """
    return MatchedRecord(
        data_source=get_str(obj, "DATA_SOURCE"),
        record_id=get_str(obj, "RECORD_ID"),
        match_key=get_str(obj, "MATCH_KEY"),
        match_level=get_int(obj, "MATCH_LEVEL"),
        match_score=get_int(obj, "MATCH_SCORE"),
        ref_score=get_int(obj, "REF_SCORE"),
        resolution_rule_code=get_str(obj, "ERRULE_CODE"),
    )


def parse_matched_records(items: Iterable[Mapping[str, Any]]) -> tuple[MatchedRecord, ...]:
    return tuple(parse_matched_record(item) for item in items)


def parse_record_summary(obj: Mapping[str, Any]) -> DataSourceRecordSummary:
    """Parse an engine-computed summary (no record ids are included)."""
    record_count = get_int(obj, "RECORD_COUNT")
    if record_count is None:
        raise MissingTelemetryError("RECORD_COUNT")
    if record_count < 0:
        raise TelemetryError(f"Negative RECORD_COUNT: {record_count}")
    return DataSourceRecordSummary(
        data_source=get_str(obj, "DATA_SOURCE"),
        record_count=record_count,
    )


def _summary_sort_key(summary: DataSourceRecordSummary) -> tuple[bool, str]:
    # records without a data source sort first
    return (summary.data_source is not None, summary.data_source or "")


def summarize_records(
    records: Iterable[MatchedRecord],
    top_count: int = TOP_RECORD_COUNT,
) -> tuple[DataSourceRecordSummary, ...]:
    """Summarize records by data source.

    Records with a missing or empty data source share one group whose
    data source is None. Each group keeps the total count and the first
    ``top_count`` record ids in ascending order. Groups are ordered by
    data source, with the None group first.
    """
    if top_count < 1:
        raise ValueError(f"top_count must be positive, got {top_count}")

    record_ids: dict[str | None, list[str]] = {}
    for record in records:
        data_source = record.data_source or None
        record_ids.setdefault(data_source, []).append(record.record_id or "")

    summaries = [
        DataSourceRecordSummary(
            data_source=data_source,
            record_count=len(ids),
            top_record_ids=tuple(sorted(ids)[:top_count]),
        )
        for data_source, ids in record_ids.items()
    ]
    summaries.sort(key=_summary_sort_key)

    logger.debug(
        "Summarized %d record(s) across %d data source(s)",
        sum(s.record_count for s in summaries),
        len(summaries),
    )
    return tuple(summaries)
