"""Data types for why-explanations."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from match_explainer.core.types import MatchLevel
from match_explainer.features.parsing import best_name_score_for
from match_explainer.features.types import CandidateKey, FeatureScore
from match_explainer.records.types import FocusRecordId
from match_explainer.relations.types import DisclosedRelation


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class MatchInfo:
    """Why two entities (or records) resolve or relate to one another."""

    why_key: str | None = None
    match_level: MatchLevel = MatchLevel.NO_MATCH
    resolution_rule: str | None = None
    candidate_keys: Mapping[str, tuple[CandidateKey, ...]] = field(
        default_factory=_empty_mapping
    )
    feature_scores: Mapping[str, tuple[FeatureScore, ...]] = field(
        default_factory=_empty_mapping
    )
    disclosed_relations: tuple[DisclosedRelation, ...] | None = None

    def best_name_score(self, name_feature_type: str = "NAME") -> int | None:
        """Best full or organization name score among the name comparisons."""
        return best_name_score_for(self.feature_scores, name_feature_type)


@dataclass(frozen=True)
class WhyPerspective:
    """The entity, and the records within it, an explanation is told from."""

    internal_id: int | None = None
    entity_id: int | None = None
    focus_records: tuple[FocusRecordId, ...] = ()


@dataclass(frozen=True)
class WhyEntityResult:
    """One record's view of why it belongs to its entity."""

    perspective: WhyPerspective
    match_info: MatchInfo


@dataclass(frozen=True)
class WhyEntitiesResult:
    """Why two entities are related, or why they did not resolve."""

    entity_id1: int | None
    entity_id2: int | None
    match_info: MatchInfo


@dataclass(frozen=True)
class WhyRecordsResult:
    """Why two records resolved, or did not."""

    perspective1: WhyPerspective
    perspective2: WhyPerspective
    match_info: MatchInfo
