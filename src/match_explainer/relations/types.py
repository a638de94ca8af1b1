"""Data types for disclosed relationships."""

from __future__ import annotations

from dataclasses import dataclass, field

from match_explainer.core.types import RelationDirection
from match_explainer.features.types import RelatedFeaturePair


@dataclass(frozen=True)
class DisclosedRelation:
    """A relationship between two entities evidenced by matching features.

    ``roles1`` are the roles of the first entity (usage types of each
    pair's first feature plus INBOUND roles from the why key); ``roles2``
    are the second entity's, fed by the OUTBOUND side.
    """

    domain: str
    direction: RelationDirection | None = None
    roles1: tuple[str, ...] = ()
    roles2: tuple[str, ...] = ()
    related_features: tuple[RelatedFeaturePair, ...] = field(default_factory=tuple)
