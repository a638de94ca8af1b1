"""Core enumerations shared by the explanation model."""

from __future__ import annotations

from enum import Enum


class MatchLevel(str, Enum):
    """How two entities (or records) resolve or relate to one another."""

    NO_MATCH = "NO_MATCH"
    RESOLVED = "RESOLVED"
    POSSIBLY_SAME = "POSSIBLY_SAME"
    POSSIBLY_RELATED = "POSSIBLY_RELATED"
    NAME_ONLY = "NAME_ONLY"
    DISCLOSED = "DISCLOSED"


class ScoringBucket(str, Enum):
    """Engine bucket describing the closeness of a feature comparison."""

    SAME = "SAME"
    CLOSE = "CLOSE"
    LIKELY = "LIKELY"
    PLAUSIBLE = "PLAUSIBLE"
    UNLIKELY = "UNLIKELY"
    NO_CHANCE = "NO_CHANCE"


class ScoringFrequency(str, Enum):
    """How many entities are expected to share a feature value.

    Declaration order matters: behavior codes are matched by prefix in
    this order.
    """

    ONE = "F1"
    FEW = "FF"
    MANY = "FM"
    VERY_MANY = "FVM"
    NAME = "NAME"
    NONE = "NONE"


class RelationDirection(str, Enum):
    """Direction of a disclosed relationship between two entities."""

    INBOUND = "INBOUND"  # entity 2 points at entity 1
    OUTBOUND = "OUTBOUND"  # entity 1 points at entity 2
    BIDIRECTIONAL = "BIDIRECTIONAL"

    def merge(self, other: RelationDirection | None) -> RelationDirection:
        """Combine two directions.

        Merging is commutative and idempotent, and any disagreement
        collapses to BIDIRECTIONAL.
        """
        if other is None or other is self:
            return self
        return RelationDirection.BIDIRECTIONAL


def merge_directions(
    current: RelationDirection | None,
    other: RelationDirection | None,
) -> RelationDirection | None:
    """Merge two optional directions, treating None as "no opinion"."""
    if current is None:
        return other
    return current.merge(other)
