"""Parsers that lift scored features out of raw engine telemetry."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from match_explainer.core.exceptions import TelemetryError
from match_explainer.core.fields import get_int, get_str
from match_explainer.core.types import ScoringBucket
from match_explainer.features.types import (
    CandidateKey,
    FeatureScore,
    NameScoring,
    RelatedFeaturePair,
    ScoredFeature,
    ScoringBehavior,
    SearchFeatureScore,
)

logger = logging.getLogger(__name__)

# Raw name-scoring fields, in NameScoring field order.
NAME_SCORE_FIELDS: dict[str, str] = {
    "full_name_score": "GNR_FN",
    "surname_score": "GNR_SN",
    "given_name_score": "GNR_GN",
    "generation_score": "GENERATION_MATCH",
    "org_name_score": "GNR_ON",
}

LINKED_PREFIX = "LINKED_"


def parse_scored_feature(
    obj: Mapping[str, Any],
    prefix: str,
    feature_type: str | None,
) -> ScoredFeature:
    """Read one side of a comparison using a positional key prefix.

    The prefix selects the side, e.g. ``"INBOUND_"`` vs ``"CANDIDATE_"``.
    The value comes from ``<prefix>FEAT`` when present, else
    ``<prefix>FEAT_DESC``; the usage type likewise prefers
    ``<prefix>FEAT_USAGE_TYPE`` over ``<prefix>FEAT_UTYPE_CODE``.
    """
    value_key = prefix + "FEAT" if prefix + "FEAT" in obj else prefix + "FEAT_DESC"
    usage_key = (
        prefix + "FEAT_USAGE_TYPE"
        if prefix + "FEAT_USAGE_TYPE" in obj
        else prefix + "FEAT_UTYPE_CODE"
    )
    return ScoredFeature(
        feature_id=get_int(obj, prefix + "FEAT_ID"),
        feature_type=feature_type,
        feature_value=get_str(obj, value_key),
        usage_type=get_str(obj, usage_key),
    )


def parse_related_features(
    obj: Mapping[str, Any], feature_type: str
) -> RelatedFeaturePair:
    """Read a disclosed-relation feature pair.

    The unprefixed side is the pair's first feature; the ``LINKED_`` side
    is the second and carries its own type in ``LINKED_FEAT_TYPE``.
    """
    feature1 = parse_scored_feature(obj, "", feature_type)
    linked_type = get_str(obj, LINKED_PREFIX + "FEAT_TYPE")
    feature2 = parse_scored_feature(obj, LINKED_PREFIX, linked_type)
    return RelatedFeaturePair(feature1=feature1, feature2=feature2)


def parse_name_scoring(obj: Mapping[str, Any]) -> NameScoring | None:
    """Collect name sub-scores; None when none of them carries a value.

    Negative scores are the engine's way of saying "not compared" and are
    treated as absent.
    """
    scores: dict[str, int | None] = {}
    for attr, key in NAME_SCORE_FIELDS.items():
        value = get_int(obj, key)
        scores[attr] = value if value is not None and value >= 0 else None

    if all(v is None for v in scores.values()):
        return None
    return NameScoring(**scores)


def _parse_bucket(code: str | None) -> ScoringBucket | None:
    if code is None:
        return None
    try:
        return ScoringBucket(code.strip().upper())
    except ValueError:
        logger.warning("Failed to parse SCORE_BUCKET: %s", code)
        return None


def _parse_behavior(code: str | None) -> ScoringBehavior | None:
    if code is None:
        return None
    try:
        return ScoringBehavior.parse(code)
    except ValueError:
        logger.warning("Failed to parse SCORE_BEHAVIOR: %s", code)
        return None


def _wants_name_scoring(
    full_score: int | None, feature_type: str, name_feature_type: str
) -> bool:
    return full_score is None or feature_type.upper() == name_feature_type.upper()


def parse_feature_score(
    obj: Mapping[str, Any],
    feature_type: str,
    name_feature_type: str = "NAME",
) -> FeatureScore:
    """Parse one inbound-vs-candidate feature comparison."""
    full_score = get_int(obj, "FULL_SCORE")

    name_scoring = None
    if _wants_name_scoring(full_score, feature_type, name_feature_type):
        name_scoring = parse_name_scoring(obj)
        if full_score is None and name_scoring is not None:
            full_score = name_scoring.as_full_score()

    return FeatureScore(
        feature_type=feature_type,
        inbound_feature=parse_scored_feature(obj, "INBOUND_", feature_type),
        candidate_feature=parse_scored_feature(obj, "CANDIDATE_", feature_type),
        full_score=full_score,
        name_scoring=name_scoring,
        scoring_bucket=_parse_bucket(get_str(obj, "SCORE_BUCKET")),
        scoring_behavior=_parse_behavior(get_str(obj, "SCORE_BEHAVIOR")),
    )


def parse_search_feature_score(
    obj: Mapping[str, Any],
    feature_type: str,
    name_feature_type: str = "NAME",
) -> SearchFeatureScore:
    """Parse one feature comparison from a search result."""
    full_score = get_int(obj, "FULL_SCORE")

    name_scoring = None
    if _wants_name_scoring(full_score, feature_type, name_feature_type):
        name_scoring = parse_name_scoring(obj)
        if full_score is None and name_scoring is not None:
            full_score = name_scoring.as_full_score()

    return SearchFeatureScore(
        feature_type=feature_type,
        inbound_feature=get_str(obj, "INBOUND_FEAT"),
        candidate_feature=get_str(obj, "CANDIDATE_FEAT"),
        full_score=full_score,
        name_scoring=name_scoring,
    )


def parse_candidate_key(obj: Mapping[str, Any], feature_type: str) -> CandidateKey:
    """Parse one candidate key."""
    return CandidateKey(
        feature_id=get_int(obj, "FEAT_ID"),
        feature_type=feature_type,
        feature_value=get_str(obj, "FEAT_DESC"),
    )


def _records_for(feature_type: str, value: Any) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        raise TelemetryError(f"Expected an array for feature type {feature_type}")
    return value


def parse_feature_scores(
    obj: Mapping[str, Any],
    name_feature_type: str = "NAME",
) -> dict[str, tuple[FeatureScore, ...]]:
    """Parse a feature-type keyed object of feature score arrays."""
    return {
        feature_type: tuple(
            parse_feature_score(item, feature_type, name_feature_type)
            for item in _records_for(feature_type, items)
        )
        for feature_type, items in obj.items()
    }


def parse_search_feature_scores(
    obj: Mapping[str, Any],
    name_feature_type: str = "NAME",
) -> dict[str, tuple[SearchFeatureScore, ...]]:
    """Parse a feature-type keyed object of search feature score arrays."""
    return {
        feature_type: tuple(
            parse_search_feature_score(item, feature_type, name_feature_type)
            for item in _records_for(feature_type, items)
        )
        for feature_type, items in obj.items()
    }


def parse_candidate_keys(obj: Mapping[str, Any]) -> dict[str, tuple[CandidateKey, ...]]:
    """Parse a feature-type keyed object of candidate key arrays."""
    return {
        feature_type: tuple(
            parse_candidate_key(item, feature_type)
            for item in _records_for(feature_type, items)
        )
        for feature_type, items in obj.items()
    }


def best_name_score(scorings: Iterable[NameScoring | None]) -> int | None:
    """Reduce a set of name scorings to the single best name score.

    Each scoring contributes the larger of its full-name and
    organization-name scores. Only candidates above zero count, so an
    all-zero or empty input yields None rather than 0.
    """
    best: int | None = None
    for scoring in scorings:
        if scoring is None:
            continue
        candidate = max(
            scoring.full_name_score if scoring.full_name_score is not None else -1,
            scoring.org_name_score if scoring.org_name_score is not None else -1,
        )
        if candidate > 0 and (best is None or candidate > best):
            best = candidate
    return best


def best_name_score_for(
    feature_scores: Mapping[str, Iterable[FeatureScore | SearchFeatureScore]],
    name_feature_type: str = "NAME",
) -> int | None:
    """Best name score across the name entries of a feature score map."""
    scores = feature_scores.get(name_feature_type, ())
    return best_name_score(score.name_scoring for score in scores)
