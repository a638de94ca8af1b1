"""Pulls why telemetry from the resolution engine and parses it."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable, Mapping

from match_explainer.config import ExplainerConfig
from match_explainer.core.exceptions import EngineError, MissingTelemetryError
from match_explainer.core.protocols import RawResponse, ResolutionEngine
from match_explainer.records.summary import summarize_records
from match_explainer.records.types import DataSourceRecordSummary, MatchedRecord
from match_explainer.why.parsing import (
    parse_why_entities_result,
    parse_why_entity_result,
    parse_why_records_result,
    why_results,
)
from match_explainer.why.types import WhyEntitiesResult, WhyEntityResult, WhyRecordsResult

logger = logging.getLogger(__name__)


class WhyExplainer:
    """Explains matches by translating engine why telemetry.

    Every call is independent: the explainer keeps no state between
    calls beyond its engine and configuration, so one instance can be
    shared across threads.
    """

    def __init__(
        self,
        engine: ResolutionEngine,
        config: ExplainerConfig | None = None,
    ) -> None:
        self.engine = engine
        self.config = config or ExplainerConfig()

    def why_entities(self, entity_id1: int, entity_id2: int) -> WhyEntitiesResult:
        """Explain how two entities relate."""
        response = self._call(
            "why_entities", self.engine.why_entities, entity_id1, entity_id2
        )
        results = why_results(response)
        if not results:
            raise MissingTelemetryError("WHY_RESULTS", "Why response has no results")
        return parse_why_entities_result(results[0], self.config)

    def why_entity(self, entity_id: int) -> list[WhyEntityResult]:
        """Explain why each record of an entity belongs to it."""
        response = self._call(
            "why_entity_by_entity_id", self.engine.why_entity_by_entity_id, entity_id
        )
        return [parse_why_entity_result(r, self.config) for r in why_results(response)]

    def why_entity_by_record(
        self, data_source: str, record_id: str
    ) -> list[WhyEntityResult]:
        """Explain why a record resolved into its entity."""
        response = self._call(
            "why_entity_by_record_id",
            self.engine.why_entity_by_record_id,
            data_source,
            record_id,
        )
        return [parse_why_entity_result(r, self.config) for r in why_results(response)]

    def why_records(
        self,
        data_source1: str,
        record_id1: str,
        data_source2: str,
        record_id2: str,
    ) -> WhyRecordsResult:
        """Explain why two records did or did not resolve."""
        response = self._call(
            "why_records",
            self.engine.why_records,
            data_source1,
            record_id1,
            data_source2,
            record_id2,
        )
        results = why_results(response)
        if not results:
            raise MissingTelemetryError("WHY_RESULTS", "Why response has no results")
        return parse_why_records_result(results[0], self.config)

    def summarize(self, records: Iterable[MatchedRecord]) -> tuple[DataSourceRecordSummary, ...]:
        """Summarize records by data source using the configured bound."""
        return summarize_records(records, self.config.top_record_count)

    def _call(
        self, operation: str, fn: Callable[..., RawResponse], *args: Any
    ) -> Mapping[str, Any]:
        logger.debug("Calling engine %s%r", operation, args)
        try:
            raw = fn(*args)
        except Exception as exc:
            raise EngineError(operation, f"{operation} failed: {exc}") from exc
        return _decode(operation, raw)


def _decode(operation: str, raw: RawResponse) -> Mapping[str, Any]:
    if isinstance(raw, Mapping):
        return raw
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise EngineError(operation, f"{operation} returned invalid JSON") from exc
    if not isinstance(decoded, Mapping):
        raise EngineError(operation, f"{operation} returned a non-object response")
    return decoded
