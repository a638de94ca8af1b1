"""Disclosed relationships: why-key grammar, pair grouping, assembly."""

from match_explainer.relations.assembler import (
    assemble_relation,
    parse_disclosed_relations,
)
from match_explainer.relations.grouper import (
    UNKNOWN_DOMAIN,
    DomainEvidence,
    group_related_features,
    infer_domain,
    longest_first,
)
from match_explainer.relations.types import DisclosedRelation
from match_explainer.relations.whykey import WhyKeyRoles, parse_why_key, render_why_key

__all__ = [
    "UNKNOWN_DOMAIN",
    "DisclosedRelation",
    "DomainEvidence",
    "WhyKeyRoles",
    "assemble_relation",
    "group_related_features",
    "infer_domain",
    "longest_first",
    "parse_disclosed_relations",
    "parse_why_key",
    "render_why_key",
]
