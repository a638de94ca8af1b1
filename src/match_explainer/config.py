"""Explainer configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from match_explainer.core.types import RelationDirection

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class RelationVocabulary:
    """Engine feature-type codes that imply a relationship direction.

    Defaults match the engine's stock relationship features.
    """

    link: str = "REL_LINK"  # both sides point at each other
    pointer: str = "REL_POINTER"  # entity 1 points at entity 2
    anchor: str = "REL_ANCHOR"  # entity 1 is pointed at

    def direction_for(self, feature_type: str | None) -> RelationDirection | None:
        """Map a relationship feature type to the direction it implies."""
        if feature_type == self.link:
            return RelationDirection.BIDIRECTIONAL
        if feature_type == self.pointer:
            return RelationDirection.OUTBOUND
        if feature_type == self.anchor:
            return RelationDirection.INBOUND
        return None


@dataclass
class ExplainerConfig:
    """Configuration for the why-explanation layer."""

    vocabulary: RelationVocabulary = field(default_factory=RelationVocabulary)

    # Record summaries keep at most this many record ids per data source
    top_record_count: int = 10

    # Feature type whose scores carry name-scoring details
    name_feature_type: str = "NAME"

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.top_record_count < 1:
            raise ValueError(
                f"top_record_count must be positive, got {self.top_record_count}"
            )

    def configure_logging(self) -> None:
        """Apply ``log_level`` with the standard log format."""
        configure_logging(self.log_level)


def configure_logging(level: str = "INFO") -> None:
    """Install the standard log format on the root logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
