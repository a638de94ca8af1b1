"""Scored features, feature comparisons and name scoring."""

from match_explainer.features.parsing import (
    best_name_score,
    best_name_score_for,
    parse_candidate_key,
    parse_candidate_keys,
    parse_feature_score,
    parse_feature_scores,
    parse_name_scoring,
    parse_related_features,
    parse_scored_feature,
    parse_search_feature_score,
    parse_search_feature_scores,
)
from match_explainer.features.types import (
    CandidateKey,
    FeatureScore,
    NameScoring,
    RelatedFeaturePair,
    ScoredFeature,
    ScoringBehavior,
    SearchFeatureScore,
)

__all__ = [
    "CandidateKey",
    "FeatureScore",
    "NameScoring",
    "RelatedFeaturePair",
    "ScoredFeature",
    "ScoringBehavior",
    "SearchFeatureScore",
    "best_name_score",
    "best_name_score_for",
    "parse_candidate_key",
    "parse_candidate_keys",
    "parse_feature_score",
    "parse_feature_scores",
    "parse_name_scoring",
    "parse_related_features",
    "parse_scored_feature",
    "parse_search_feature_score",
    "parse_search_feature_scores",
]
