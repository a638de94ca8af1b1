"""Pytest fixtures for match-explainer tests.

Provides fixtures for:
- Raw engine telemetry (match info, disclosed relation pairs, why responses)
- Parsed records for summary tests
- A mocked resolution engine
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from match_explainer.config import ExplainerConfig
from match_explainer.records.types import MatchedRecord


# ============================================================================
# Raw telemetry fixtures
# ============================================================================


@pytest.fixture
def raw_name_score() -> dict[str, Any]:
    """A NAME feature comparison with name sub-scores and no full score."""
    return {
        "INBOUND_FEAT_ID": 10,
        "INBOUND_FEAT": "John Smith",
        "INBOUND_FEAT_USAGE_TYPE": "PRIMARY",
        "CANDIDATE_FEAT_ID": 20,
        "CANDIDATE_FEAT": "Jon Smith",
        "CANDIDATE_FEAT_USAGE_TYPE": "",
        "GNR_FN": 92,
        "GNR_SN": 100,
        "GNR_GN": 88,
        "GENERATION_MATCH": -1,
        "GNR_ON": -1,
        "SCORE_BUCKET": "CLOSE",
        "SCORE_BEHAVIOR": "NAME",
    }


@pytest.fixture
def raw_address_score() -> dict[str, Any]:
    """An ADDRESS comparison that carries its own full score."""
    return {
        "INBOUND_FEAT_ID": 11,
        "INBOUND_FEAT_DESC": "101 Main St, Las Vegas",
        "CANDIDATE_FEAT_ID": 21,
        "CANDIDATE_FEAT_DESC": "101 Main Street, Las Vegas",
        "FULL_SCORE": 95,
        "SCORE_BUCKET": "SAME",
        "SCORE_BEHAVIOR": "FF",
    }


@pytest.fixture
def raw_disclosed_pairs() -> dict[str, Any]:
    """Relationship feature pairs as the engine reports them."""
    return {
        "REL_POINTER": [
            {
                "FEAT_ID": 100,
                "FEAT_DESC": "EMPLOYER ACME-1",
                "FEAT_UTYPE_CODE": "EMPLOYER",
                "LINKED_FEAT_ID": 200,
                "LINKED_FEAT_TYPE": "REL_ANCHOR",
                "LINKED_FEAT_DESC": "EMPLOYER ACME-1",
                "LINKED_FEAT_UTYPE_CODE": "EMPLOYEE",
            },
        ],
        "REL_LINK": [
            {
                "DOMAIN": "SPOUSE",
                "FEAT_ID": 101,
                "FEAT_DESC": "SPOUSE 7",
                "LINKED_FEAT_ID": 201,
                "LINKED_FEAT_TYPE": "REL_LINK",
                "LINKED_FEAT_DESC": "SPOUSE 7",
            },
        ],
    }


@pytest.fixture
def raw_match_info(
    raw_name_score: dict[str, Any],
    raw_address_score: dict[str, Any],
    raw_disclosed_pairs: dict[str, Any],
) -> dict[str, Any]:
    """A complete MATCH_INFO section for a disclosed relationship."""
    return {
        "WHY_KEY": "+NAME+ADDRESS+EMPLOYER(EMPLOYER:EMPLOYEE,OWNER)+SPOUSE(SPOUSE:SPOUSE)",
        "MATCH_LEVEL_CODE": "DISCLOSED",
        "WHY_ERRULE_CODE": "DISCLOSED",
        "CANDIDATE_KEYS": {
            "NAME_KEY": [
                {"FEAT_ID": 5, "FEAT_DESC": "JN|SM0"},
                {"FEAT_ID": 6, "FEAT_DESC": "JN|SM0|ADDR"},
            ],
        },
        "FEATURE_SCORES": {
            "NAME": [raw_name_score],
            "ADDRESS": [raw_address_score],
        },
        "DISCLOSED_RELATIONS": raw_disclosed_pairs,
    }


@pytest.fixture
def raw_why_entities_response(raw_match_info: dict[str, Any]) -> dict[str, Any]:
    """Engine response for a why-entities call."""
    return {
        "WHY_RESULTS": [
            {"ENTITY_ID": 1, "ENTITY_ID_2": 2, "MATCH_INFO": raw_match_info},
        ],
        "ENTITIES": [],
    }


@pytest.fixture
def raw_why_records_response(raw_match_info: dict[str, Any]) -> dict[str, Any]:
    """Engine response for a why-records call."""
    return {
        "WHY_RESULTS": [
            {
                "INTERNAL_ID": 7,
                "ENTITY_ID": 1,
                "FOCUS_RECORDS": [{"DATA_SOURCE": "customers ", "RECORD_ID": " 1001"}],
                "INTERNAL_ID_2": 8,
                "ENTITY_ID_2": 2,
                "FOCUS_RECORDS_2": [{"DATA_SOURCE": "WATCHLIST", "RECORD_ID": "W-9"}],
                "MATCH_INFO": raw_match_info,
            },
        ],
    }


# ============================================================================
# Parsed fixtures
# ============================================================================


@pytest.fixture
def matched_records() -> list[MatchedRecord]:
    return [
        MatchedRecord(data_source="CUSTOMERS", record_id="5"),
        MatchedRecord(data_source="CUSTOMERS", record_id="1"),
        MatchedRecord(data_source="WATCHLIST", record_id="9"),
    ]


@pytest.fixture
def config() -> ExplainerConfig:
    return ExplainerConfig()


@pytest.fixture
def mock_engine(raw_why_entities_response, raw_why_records_response) -> MagicMock:
    """A resolution engine double answering with canned telemetry."""
    engine = MagicMock()
    engine.why_entities.return_value = raw_why_entities_response
    engine.why_records.return_value = raw_why_records_response
    engine.why_entity_by_entity_id.return_value = {
        "WHY_RESULTS": [
            dict(
                raw_why_records_response["WHY_RESULTS"][0],
            ),
        ],
    }
    engine.why_entity_by_record_id.return_value = {"WHY_RESULTS": []}
    return engine
