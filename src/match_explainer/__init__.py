"""Match Explainer - translates entity-resolution why telemetry.

The resolution engine answers "why did these match?" with flat,
code-keyed JSON. This package turns that telemetry into stable,
documented structures:

- Match info (why key, match level, resolution rule, candidate keys,
  feature scores)
- Disclosed relations derived from the why-key grammar and the paired
  relationship features
- Best-name-score reduction over name comparisons
- Per-data-source record summaries

Example:
    >>> from match_explainer import WhyExplainer
    >>> from match_explainer.schemas import WhyEntitiesResultResponse
    >>>
    >>> explainer = WhyExplainer(engine)
    >>> result = explainer.why_entities(1, 2)
    >>> for relation in result.match_info.disclosed_relations or ():
    ...     print(relation.domain, relation.direction, relation.roles1)
    >>> payload = WhyEntitiesResultResponse.from_model(result).to_json_dict()
"""

from match_explainer.config import ExplainerConfig, RelationVocabulary, configure_logging
from match_explainer.core import (
    EngineError,
    ExplainerError,
    MatchLevel,
    MissingTelemetryError,
    RelationDirection,
    ResolutionEngine,
    ScoringBucket,
    ScoringFrequency,
    TelemetryError,
    UnknownCodeError,
)
from match_explainer.features import (
    CandidateKey,
    FeatureScore,
    NameScoring,
    RelatedFeaturePair,
    ScoredFeature,
    ScoringBehavior,
    SearchFeatureScore,
    best_name_score,
)
from match_explainer.records import (
    DataSourceRecordSummary,
    FocusRecordId,
    MatchedRecord,
    summarize_records,
)
from match_explainer.relations import (
    DisclosedRelation,
    parse_disclosed_relations,
    parse_why_key,
    render_why_key,
)
from match_explainer.why import (
    MatchInfo,
    WhyEntitiesResult,
    WhyEntityResult,
    WhyExplainer,
    WhyPerspective,
    WhyRecordsResult,
    parse_match_info,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "ExplainerConfig",
    "RelationVocabulary",
    "configure_logging",
    # Core
    "MatchLevel",
    "RelationDirection",
    "ResolutionEngine",
    "ScoringBucket",
    "ScoringFrequency",
    # Features
    "CandidateKey",
    "FeatureScore",
    "NameScoring",
    "RelatedFeaturePair",
    "ScoredFeature",
    "ScoringBehavior",
    "SearchFeatureScore",
    "best_name_score",
    # Records
    "DataSourceRecordSummary",
    "FocusRecordId",
    "MatchedRecord",
    "summarize_records",
    # Relations
    "DisclosedRelation",
    "parse_disclosed_relations",
    "parse_why_key",
    "render_why_key",
    # Why
    "MatchInfo",
    "WhyEntitiesResult",
    "WhyEntityResult",
    "WhyExplainer",
    "WhyPerspective",
    "WhyRecordsResult",
    "parse_match_info",
    # Exceptions
    "EngineError",
    "ExplainerError",
    "MissingTelemetryError",
    "TelemetryError",
    "UnknownCodeError",
]
