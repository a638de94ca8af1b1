"""Groups disclosed-relation feature pairs by relationship domain."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from match_explainer.config import RelationVocabulary
from match_explainer.core.exceptions import TelemetryError
from match_explainer.core.fields import get_str
from match_explainer.core.types import RelationDirection, merge_directions
from match_explainer.features.parsing import parse_related_features
from match_explainer.features.types import RelatedFeaturePair

logger = logging.getLogger(__name__)

# Domain assigned to pairs that neither declare nor imply one
UNKNOWN_DOMAIN = ""


@dataclass
class DomainEvidence:
    """Feature pairs collected for one domain, and what they imply."""

    domain: str
    pairs: list[RelatedFeaturePair] = field(default_factory=list)
    direction: RelationDirection | None = None
    # dicts used as insertion-ordered sets
    roles1: dict[str, None] = field(default_factory=dict)
    roles2: dict[str, None] = field(default_factory=dict)

    def add(self, pair: RelatedFeaturePair, vocabulary: RelationVocabulary) -> None:
        """Record a pair and fold in its direction and role contributions."""
        self.pairs.append(pair)

        implied = vocabulary.direction_for(pair.feature1.feature_type)
        if implied is RelationDirection.BIDIRECTIONAL:
            self.direction = implied
        elif implied is not None:
            self.direction = merge_directions(self.direction, implied)

        usage1 = pair.feature1.usage_type
        usage2 = pair.feature2.usage_type
        if usage1 and usage1.strip():
            self.roles1[usage1] = None
        if usage2 and usage2.strip():
            self.roles2[usage2] = None


def longest_first(domains: Iterable[str]) -> list[str]:
    """Order domains by descending length so longer names match first."""
    return sorted(domains, key=len, reverse=True)


def infer_domain(feature_value: str | None, sorted_domains: list[str]) -> str:
    """Find the domain a feature value is prefixed with.

    A value belongs to a domain when it starts with the domain name
    followed by exactly one space. ``sorted_domains`` must be longest
    first so ``NAME_ON`` is tried before ``NAME``.
    """
    if feature_value is not None:
        for domain in sorted_domains:
            if feature_value.startswith(domain + " "):
                return domain
    return UNKNOWN_DOMAIN


def group_related_features(
    raw_pairs: Mapping[str, Any],
    known_domains: Iterable[str],
    vocabulary: RelationVocabulary | None = None,
) -> dict[str, DomainEvidence]:
    """Group raw feature pairs by domain, in order of first appearance.

    Args:
        raw_pairs: Feature type to array of raw pair records.
        known_domains: Domains declared by the why key, used when a pair
            carries no explicit ``DOMAIN``.
        vocabulary: Feature types that imply a direction.

    Returns:
        Mapping of domain to the evidence gathered for it.
    """
    vocabulary = vocabulary or RelationVocabulary()
    sorted_domains = longest_first(known_domains)
    groups: dict[str, DomainEvidence] = {}

    for feature_type, items in raw_pairs.items():
        if not isinstance(items, list):
            raise TelemetryError(f"Expected an array for feature type {feature_type}")
        for item in items:
            pair = parse_related_features(item, feature_type)
            domain = get_str(item, "DOMAIN")
            if domain is None:
                domain = infer_domain(pair.feature1.feature_value, sorted_domains)

            evidence = groups.get(domain)
            if evidence is None:
                evidence = groups[domain] = DomainEvidence(domain)
            evidence.add(pair, vocabulary)

    logger.debug(
        "Grouped %d feature pair(s) into %d domain(s)",
        sum(len(e.pairs) for e in groups.values()),
        len(groups),
    )
    return groups
