"""Records, focus record ids and data-source record summaries."""

from match_explainer.records.summary import (
    TOP_RECORD_COUNT,
    parse_focus_record_id,
    parse_matched_record,
    parse_matched_records,
    parse_record_summary,
    summarize_records,
)
from match_explainer.records.types import (
    DataSourceRecordSummary,
    FocusRecordId,
    MatchedRecord,
)

__all__ = [
    "TOP_RECORD_COUNT",
    "DataSourceRecordSummary",
    "FocusRecordId",
    "MatchedRecord",
    "parse_focus_record_id",
    "parse_matched_record",
    "parse_matched_records",
    "parse_record_summary",
    "summarize_records",
]
