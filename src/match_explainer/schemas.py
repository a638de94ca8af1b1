"""Pydantic response models for explanation payloads.

Fields serialize under camelCase names, and empty values (None, empty
strings, lists and maps) are left out of the JSON entirely.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from match_explainer.core.types import MatchLevel, RelationDirection, ScoringBucket
from match_explainer.features.types import (
    CandidateKey,
    FeatureScore,
    NameScoring,
    RelatedFeaturePair,
    ScoredFeature,
)
from match_explainer.records.types import DataSourceRecordSummary, FocusRecordId
from match_explainer.relations.types import DisclosedRelation
from match_explainer.why.types import (
    MatchInfo,
    WhyEntitiesResult,
    WhyEntityResult,
    WhyPerspective,
    WhyRecordsResult,
)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, dict)) and len(value) == 0)


def drop_empty(value: Any) -> Any:
    """Recursively remove empty members from dumped JSON objects."""
    if isinstance(value, dict):
        cleaned = {k: drop_empty(v) for k, v in value.items()}
        return {k: v for k, v in cleaned.items() if not _is_empty(v)}
    if isinstance(value, list):
        return [drop_empty(v) for v in value]
    return value


class ResponseModel(BaseModel):
    """Base for all explanation response models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        """Dump to JSON-ready data using camelCase keys, without empties."""
        return drop_empty(self.model_dump(mode="json", by_alias=True))


# ========== Features ==========

class ScoredFeatureResponse(ResponseModel):
    feature_id: int | None = None
    feature_type: str | None = None
    feature_value: str | None = None
    usage_type: str | None = None

    @classmethod
    def from_model(cls, feature: ScoredFeature) -> ScoredFeatureResponse:
        return cls(
            feature_id=feature.feature_id,
            feature_type=feature.feature_type,
            feature_value=feature.feature_value,
            usage_type=feature.usage_type,
        )


class RelatedFeaturesResponse(ResponseModel):
    feature1: ScoredFeatureResponse
    feature2: ScoredFeatureResponse

    @classmethod
    def from_model(cls, pair: RelatedFeaturePair) -> RelatedFeaturesResponse:
        return cls(
            feature1=ScoredFeatureResponse.from_model(pair.feature1),
            feature2=ScoredFeatureResponse.from_model(pair.feature2),
        )


class CandidateKeyResponse(ResponseModel):
    feature_id: int | None = None
    feature_type: str | None = None
    feature_value: str | None = None

    @classmethod
    def from_model(cls, key: CandidateKey) -> CandidateKeyResponse:
        return cls(
            feature_id=key.feature_id,
            feature_type=key.feature_type,
            feature_value=key.feature_value,
        )


class NameScoringResponse(ResponseModel):
    full_name_score: int | None = None
    surname_score: int | None = None
    given_name_score: int | None = None
    generation_score: int | None = None
    org_name_score: int | None = None

    @classmethod
    def from_model(cls, scoring: NameScoring) -> NameScoringResponse:
        return cls(
            full_name_score=scoring.full_name_score,
            surname_score=scoring.surname_score,
            given_name_score=scoring.given_name_score,
            generation_score=scoring.generation_score,
            org_name_score=scoring.org_name_score,
        )


class FeatureScoreResponse(ResponseModel):
    feature_type: str
    inbound_feature: ScoredFeatureResponse
    candidate_feature: ScoredFeatureResponse
    score: int | None = None
    name_scoring_details: NameScoringResponse | None = None
    scoring_bucket: ScoringBucket | None = None
    scoring_behavior: str | None = Field(None, description="e.g. FM, F1E, FFES")

    @classmethod
    def from_model(cls, score: FeatureScore) -> FeatureScoreResponse:
        return cls(
            feature_type=score.feature_type,
            inbound_feature=ScoredFeatureResponse.from_model(score.inbound_feature),
            candidate_feature=ScoredFeatureResponse.from_model(score.candidate_feature),
            score=score.score,
            name_scoring_details=(
                NameScoringResponse.from_model(score.name_scoring)
                if score.name_scoring is not None else None
            ),
            scoring_bucket=score.scoring_bucket,
            scoring_behavior=(
                score.scoring_behavior.code if score.scoring_behavior is not None else None
            ),
        )


# ========== Relations ==========

class DisclosedRelationResponse(ResponseModel):
    domain: str | None = None
    direction: RelationDirection | None = None
    roles1: list[str] = Field(default_factory=list)
    roles2: list[str] = Field(default_factory=list)
    related_features: list[RelatedFeaturesResponse] = Field(default_factory=list)

    @classmethod
    def from_model(cls, relation: DisclosedRelation) -> DisclosedRelationResponse:
        return cls(
            domain=relation.domain,
            direction=relation.direction,
            roles1=list(relation.roles1),
            roles2=list(relation.roles2),
            related_features=[
                RelatedFeaturesResponse.from_model(p) for p in relation.related_features
            ],
        )


# ========== Match info ==========

class MatchInfoResponse(ResponseModel):
    why_key: str | None = None
    match_level: MatchLevel
    resolution_rule: str | None = None
    candidate_keys: dict[str, list[CandidateKeyResponse]] = Field(default_factory=dict)
    feature_scores: dict[str, list[FeatureScoreResponse]] = Field(default_factory=dict)
    disclosed_relations: list[DisclosedRelationResponse] = Field(default_factory=list)

    @classmethod
    def from_model(cls, info: MatchInfo) -> MatchInfoResponse:
        return cls(
            why_key=info.why_key,
            match_level=info.match_level,
            resolution_rule=info.resolution_rule,
            candidate_keys={
                ftype: [CandidateKeyResponse.from_model(k) for k in keys]
                for ftype, keys in info.candidate_keys.items()
            },
            feature_scores={
                ftype: [FeatureScoreResponse.from_model(s) for s in scores]
                for ftype, scores in info.feature_scores.items()
            },
            disclosed_relations=[
                DisclosedRelationResponse.from_model(r)
                for r in (info.disclosed_relations or ())
            ],
        )


# ========== Why results ==========

class FocusRecordIdResponse(ResponseModel):
    data_source: str | None = None
    record_id: str | None = None

    @classmethod
    def from_model(cls, focus: FocusRecordId) -> FocusRecordIdResponse:
        return cls(data_source=focus.data_source, record_id=focus.record_id)


class WhyPerspectiveResponse(ResponseModel):
    internal_id: int | None = None
    entity_id: int | None = None
    focus_records: list[FocusRecordIdResponse] = Field(default_factory=list)

    @classmethod
    def from_model(cls, perspective: WhyPerspective) -> WhyPerspectiveResponse:
        return cls(
            internal_id=perspective.internal_id,
            entity_id=perspective.entity_id,
            focus_records=[
                FocusRecordIdResponse.from_model(f) for f in perspective.focus_records
            ],
        )


class WhyEntityResultResponse(ResponseModel):
    perspective: WhyPerspectiveResponse | None = None
    match_info: MatchInfoResponse | None = None

    @classmethod
    def from_model(cls, result: WhyEntityResult) -> WhyEntityResultResponse:
        return cls(
            perspective=WhyPerspectiveResponse.from_model(result.perspective),
            match_info=MatchInfoResponse.from_model(result.match_info),
        )


class WhyEntitiesResultResponse(ResponseModel):
    entity_id1: int | None = None
    entity_id2: int | None = None
    match_info: MatchInfoResponse | None = None

    @classmethod
    def from_model(cls, result: WhyEntitiesResult) -> WhyEntitiesResultResponse:
        return cls(
            entity_id1=result.entity_id1,
            entity_id2=result.entity_id2,
            match_info=MatchInfoResponse.from_model(result.match_info),
        )


class WhyRecordsResultResponse(ResponseModel):
    perspective1: WhyPerspectiveResponse
    perspective2: WhyPerspectiveResponse
    match_info: MatchInfoResponse

    @classmethod
    def from_model(cls, result: WhyRecordsResult) -> WhyRecordsResultResponse:
        return cls(
            perspective1=WhyPerspectiveResponse.from_model(result.perspective1),
            perspective2=WhyPerspectiveResponse.from_model(result.perspective2),
            match_info=MatchInfoResponse.from_model(result.match_info),
        )


# ========== Record summaries ==========

class DataSourceRecordSummaryResponse(ResponseModel):
    data_source: str | None = None
    record_count: int = 0
    top_record_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_model(cls, summary: DataSourceRecordSummary) -> DataSourceRecordSummaryResponse:
        return cls(
            data_source=summary.data_source,
            record_count=summary.record_count,
            top_record_ids=list(summary.top_record_ids),
        )
