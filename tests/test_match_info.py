"""Tests for parsing match info and why responses."""

from __future__ import annotations

import pytest

from match_explainer.config import ExplainerConfig, RelationVocabulary
from match_explainer.core.exceptions import MissingTelemetryError, UnknownCodeError
from match_explainer.core.types import MatchLevel, RelationDirection
from match_explainer.records.types import FocusRecordId
from match_explainer.why.parsing import (
    parse_match_info,
    parse_why_entities_result,
    parse_why_entity_result,
    parse_why_perspective,
    parse_why_records_result,
    why_results,
)


# ============================================================================
# Match info
# ============================================================================


class TestParseMatchInfo:
    def test_full_parse(self, raw_match_info):
        info = parse_match_info(raw_match_info)

        assert info.why_key == raw_match_info["WHY_KEY"]
        assert info.match_level is MatchLevel.DISCLOSED
        assert info.resolution_rule == "DISCLOSED"
        assert list(info.candidate_keys) == ["NAME_KEY"]
        assert len(info.candidate_keys["NAME_KEY"]) == 2
        assert list(info.feature_scores) == ["NAME", "ADDRESS"]
        assert [r.domain for r in info.disclosed_relations] == ["EMPLOYER", "SPOUSE"]
        assert info.disclosed_relations[0].direction is RelationDirection.OUTBOUND

    def test_best_name_score(self, raw_match_info):
        assert parse_match_info(raw_match_info).best_name_score() == 92

    def test_maps_are_read_only(self, raw_match_info):
        info = parse_match_info(raw_match_info)
        with pytest.raises(TypeError):
            info.feature_scores["PHONE"] = ()

    @pytest.mark.parametrize("section", ["CANDIDATE_KEYS", "FEATURE_SCORES"])
    def test_required_sections(self, raw_match_info, section):
        del raw_match_info[section]
        with pytest.raises(MissingTelemetryError) as exc_info:
            parse_match_info(raw_match_info)
        assert exc_info.value.section == section

    def test_disclosed_relations_absent(self, raw_match_info):
        del raw_match_info["DISCLOSED_RELATIONS"]
        assert parse_match_info(raw_match_info).disclosed_relations is None

    def test_blank_values_become_none(self, raw_match_info):
        raw_match_info.update(WHY_KEY="  ", WHY_ERRULE_CODE="", MATCH_LEVEL_CODE=" ")
        del raw_match_info["DISCLOSED_RELATIONS"]
        info = parse_match_info(raw_match_info)
        assert info.why_key is None
        assert info.resolution_rule is None
        assert info.match_level is MatchLevel.NO_MATCH

    def test_unknown_match_level(self, raw_match_info):
        raw_match_info["MATCH_LEVEL_CODE"] = "TOTALLY_SAME"
        with pytest.raises(UnknownCodeError) as exc_info:
            parse_match_info(raw_match_info)
        assert exc_info.value.field == "MATCH_LEVEL_CODE"
        assert exc_info.value.code == "TOTALLY_SAME"

    def test_config_vocabulary_is_used(self, raw_match_info):
        config = ExplainerConfig(vocabulary=RelationVocabulary(pointer="REL_LINK", link="X"))
        info = parse_match_info(raw_match_info, config)
        # pointer now maps REL_LINK to OUTBOUND; REL_POINTER implies nothing
        employer, spouse = info.disclosed_relations
        assert employer.direction is None
        assert spouse.direction is RelationDirection.OUTBOUND


# ============================================================================
# Why results
# ============================================================================


class TestWhyResults:
    def test_perspectives(self, raw_why_records_response):
        raw = raw_why_records_response["WHY_RESULTS"][0]
        first = parse_why_perspective(raw)
        second = parse_why_perspective(raw, "_2")
        assert (first.internal_id, first.entity_id) == (7, 1)
        assert first.focus_records == (FocusRecordId("CUSTOMERS", "1001"),)
        assert (second.internal_id, second.entity_id) == (8, 2)
        assert second.focus_records[0].record_id == "W-9"

    def test_perspective_without_focus_records(self):
        perspective = parse_why_perspective({"ENTITY_ID": 3})
        assert perspective.focus_records == ()
        assert perspective.internal_id is None

    def test_entities_result(self, raw_why_entities_response):
        result = parse_why_entities_result(raw_why_entities_response["WHY_RESULTS"][0])
        assert (result.entity_id1, result.entity_id2) == (1, 2)
        assert result.match_info.match_level is MatchLevel.DISCLOSED

    def test_records_result(self, raw_why_records_response):
        result = parse_why_records_result(raw_why_records_response["WHY_RESULTS"][0])
        assert result.perspective1.entity_id == 1
        assert result.perspective2.entity_id == 2

    def test_entity_result(self, raw_why_records_response):
        result = parse_why_entity_result(raw_why_records_response["WHY_RESULTS"][0])
        assert result.perspective.internal_id == 7

    def test_match_info_required(self):
        with pytest.raises(MissingTelemetryError):
            parse_why_entities_result({"ENTITY_ID": 1, "ENTITY_ID_2": 2})

    def test_why_results_required(self):
        with pytest.raises(MissingTelemetryError):
            why_results({"ENTITIES": []})
