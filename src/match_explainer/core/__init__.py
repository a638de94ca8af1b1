"""Core types, protocols and exceptions for Match Explainer."""

from match_explainer.core.types import (
    MatchLevel,
    RelationDirection,
    ScoringBucket,
    ScoringFrequency,
    merge_directions,
)
from match_explainer.core.protocols import RawResponse, ResolutionEngine
from match_explainer.core.exceptions import (
    EngineError,
    ExplainerError,
    MissingTelemetryError,
    TelemetryError,
    UnknownCodeError,
)

__all__ = [
    # Types
    "MatchLevel",
    "RelationDirection",
    "ScoringBucket",
    "ScoringFrequency",
    "merge_directions",
    # Protocols
    "RawResponse",
    "ResolutionEngine",
    # Exceptions
    "EngineError",
    "ExplainerError",
    "MissingTelemetryError",
    "TelemetryError",
    "UnknownCodeError",
]
