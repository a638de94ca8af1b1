"""Protocols (interfaces) for external collaborators."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Union, runtime_checkable

# The native engine answers with JSON text; test doubles and some
# bindings hand back the decoded mapping directly.
RawResponse = Union[str, Mapping[str, Any]]


@runtime_checkable
class ResolutionEngine(Protocol):
    """The external entity-resolution engine that produces why telemetry."""

    def why_entities(self, entity_id1: int, entity_id2: int) -> RawResponse:
        """Explain why two entities are (or are not) related."""
        ...

    def why_entity_by_entity_id(self, entity_id: int) -> RawResponse:
        """Explain why the records of an entity resolved together."""
        ...

    def why_entity_by_record_id(self, data_source: str, record_id: str) -> RawResponse:
        """Explain why a record resolved into its entity."""
        ...

    def why_records(
        self,
        data_source1: str,
        record_id1: str,
        data_source2: str,
        record_id2: str,
    ) -> RawResponse:
        """Explain why two records did (or did not) resolve."""
        ...
