"""Why-explanations: match info, perspectives and the explainer service."""

from match_explainer.why.explainer import WhyExplainer
from match_explainer.why.parsing import (
    parse_match_info,
    parse_why_entities_result,
    parse_why_entity_result,
    parse_why_perspective,
    parse_why_records_result,
)
from match_explainer.why.types import (
    MatchInfo,
    WhyEntitiesResult,
    WhyEntityResult,
    WhyPerspective,
    WhyRecordsResult,
)

__all__ = [
    "MatchInfo",
    "WhyEntitiesResult",
    "WhyEntityResult",
    "WhyExplainer",
    "WhyPerspective",
    "WhyRecordsResult",
    "parse_match_info",
    "parse_why_entities_result",
    "parse_why_entity_result",
    "parse_why_perspective",
    "parse_why_records_result",
]
