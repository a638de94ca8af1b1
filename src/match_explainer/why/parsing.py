"""Parsers for the engine's why responses."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from match_explainer.config import ExplainerConfig
from match_explainer.core.exceptions import UnknownCodeError
from match_explainer.core.fields import (
    get_array,
    get_blank_as_none,
    get_int,
    get_object,
    require_array,
    require_object,
)
from match_explainer.core.types import MatchLevel
from match_explainer.features.parsing import parse_candidate_keys, parse_feature_scores
from match_explainer.records.summary import parse_focus_record_id
from match_explainer.relations.assembler import parse_disclosed_relations
from match_explainer.why.types import (
    MatchInfo,
    WhyEntitiesResult,
    WhyEntityResult,
    WhyPerspective,
    WhyRecordsResult,
)

logger = logging.getLogger(__name__)


def _parse_match_level(obj: Mapping[str, Any]) -> MatchLevel:
    code = get_blank_as_none(obj, "MATCH_LEVEL_CODE")
    if code is None:
        return MatchLevel.NO_MATCH
    try:
        return MatchLevel(code.strip())
    except ValueError as exc:
        raise UnknownCodeError("MATCH_LEVEL_CODE", code) from exc


def parse_match_info(
    obj: Mapping[str, Any],
    config: ExplainerConfig | None = None,
) -> MatchInfo:
    """Parse the ``MATCH_INFO`` section of a why response.

    ``CANDIDATE_KEYS`` and ``FEATURE_SCORES`` are required;
    ``DISCLOSED_RELATIONS`` only appears for disclosed relationships.

    Raises:
        MissingTelemetryError: If a required section is absent.
        UnknownCodeError: If the match level code is not recognised.
    """
    config = config or ExplainerConfig()

    why_key = get_blank_as_none(obj, "WHY_KEY")
    candidate_keys = parse_candidate_keys(require_object(obj, "CANDIDATE_KEYS"))
    feature_scores = parse_feature_scores(
        require_object(obj, "FEATURE_SCORES"), config.name_feature_type
    )
    disclosed = parse_disclosed_relations(
        get_object(obj, "DISCLOSED_RELATIONS"), why_key, config.vocabulary
    )

    return MatchInfo(
        why_key=why_key,
        match_level=_parse_match_level(obj),
        resolution_rule=get_blank_as_none(obj, "WHY_ERRULE_CODE"),
        candidate_keys=MappingProxyType(candidate_keys),
        feature_scores=MappingProxyType(feature_scores),
        disclosed_relations=disclosed,
    )


def parse_why_perspective(obj: Mapping[str, Any], suffix: str = "") -> WhyPerspective:
    """Parse a perspective; ``suffix`` selects the second one (``"_2"``)."""
    focus = get_array(obj, "FOCUS_RECORDS" + suffix) or []
    return WhyPerspective(
        internal_id=get_int(obj, "INTERNAL_ID" + suffix),
        entity_id=get_int(obj, "ENTITY_ID" + suffix),
        focus_records=tuple(parse_focus_record_id(item) for item in focus),
    )


def parse_why_entity_result(
    obj: Mapping[str, Any], config: ExplainerConfig | None = None
) -> WhyEntityResult:
    return WhyEntityResult(
        perspective=parse_why_perspective(obj),
        match_info=parse_match_info(require_object(obj, "MATCH_INFO"), config),
    )


def parse_why_entities_result(
    obj: Mapping[str, Any], config: ExplainerConfig | None = None
) -> WhyEntitiesResult:
    return WhyEntitiesResult(
        entity_id1=get_int(obj, "ENTITY_ID"),
        entity_id2=get_int(obj, "ENTITY_ID_2"),
        match_info=parse_match_info(require_object(obj, "MATCH_INFO"), config),
    )


def parse_why_records_result(
    obj: Mapping[str, Any], config: ExplainerConfig | None = None
) -> WhyRecordsResult:
    return WhyRecordsResult(
        perspective1=parse_why_perspective(obj),
        perspective2=parse_why_perspective(obj, "_2"),
        match_info=parse_match_info(require_object(obj, "MATCH_INFO"), config),
    )


def why_results(response: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    """The ``WHY_RESULTS`` array every why response carries."""
    results = require_array(response, "WHY_RESULTS")
    logger.debug("Why response carries %d result(s)", len(results))
    return results
