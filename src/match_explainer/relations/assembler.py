"""Builds disclosed relations from feature pairs and the why key."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from match_explainer.config import RelationVocabulary
from match_explainer.core.types import RelationDirection
from match_explainer.relations.grouper import DomainEvidence, group_related_features
from match_explainer.relations.types import DisclosedRelation
from match_explainer.relations.whykey import WhyKeyRoles, parse_why_key

logger = logging.getLogger(__name__)


def _with_declared(observed: dict[str, None], declared: tuple[str, ...]) -> tuple[str, ...]:
    merged = dict(observed)
    for role in declared:
        merged.setdefault(role, None)
    return tuple(merged)


def assemble_relation(
    evidence: DomainEvidence, why_key_roles: WhyKeyRoles
) -> DisclosedRelation:
    """Turn one domain's evidence into a relation.

    Roles declared in the why key for the same domain are added to the
    roles observed on the features; observed roles are never removed.
    """
    declared = why_key_roles.get(evidence.domain, {})
    return DisclosedRelation(
        domain=evidence.domain,
        direction=evidence.direction,
        roles1=_with_declared(
            evidence.roles1, declared.get(RelationDirection.INBOUND, ())
        ),
        roles2=_with_declared(
            evidence.roles2, declared.get(RelationDirection.OUTBOUND, ())
        ),
        related_features=tuple(evidence.pairs),
    )


def parse_disclosed_relations(
    raw_pairs: Mapping[str, Any] | None,
    why_key: str | None,
    vocabulary: RelationVocabulary | None = None,
) -> tuple[DisclosedRelation, ...] | None:
    """Derive disclosed relations from raw feature pairs and a why key.

    One relation is produced per domain that has at least one feature
    pair, in order of first appearance. Domains named only by the why
    key produce nothing.

    Returns:
        The relations, or None when the telemetry carries no pairs section.
    """
    if raw_pairs is None:
        return None

    why_key_roles = parse_why_key(why_key)
    groups = group_related_features(raw_pairs, why_key_roles.keys(), vocabulary)
    relations = tuple(
        assemble_relation(evidence, why_key_roles) for evidence in groups.values()
    )

    logger.debug("Assembled %d disclosed relation(s)", len(relations))
    return relations
