# tests/test_response_handler.py > 추출 응답 스키마 검증
import json

import pytest

from wildwatch.core.exceptions import ExtractionError
from wildwatch.llm.models import IncidentCategory
from wildwatch.llm.utils.llm_response_handler import parse_extraction_response


def test_full_response():
    text = json.dumps(
        {
            "category": "poaching",
            "location": {"state": "Assam", "district": "Golaghat"},
            "indicators": {"injury": True, "weapon": True, "fireSpread": False, "repeatEvent": False},
            "confidence": 85,
        }
    )
    extracted = parse_extraction_response(text)
    assert extracted.category == IncidentCategory.POACHING
    assert extracted.location.state == "Assam"
    assert extracted.indicators.injury is True
    assert extracted.indicators.active() == ["injury", "weapon"]
    assert extracted.confidence == 85


def test_missing_optional_parts_default():
    extracted = parse_extraction_response('{"category": "other", "confidence": 50}')
    assert extracted.location.state is None
    assert extracted.location.district is None
    assert extracted.indicators.active() == []


def test_partial_and_null_indicators_default_to_false():
    extracted = parse_extraction_response(
        '{"category": "fire", "indicators": {"fireSpread": true, "injury": null}, '
        '"location": null, "confidence": 70}'
    )
    assert extracted.indicators.fire_spread is True
    assert extracted.indicators.injury is False
    assert extracted.indicators.weapon is False
    assert extracted.indicators.repeat_event is False
    assert extracted.location.state is None


@pytest.mark.parametrize(
    "location, expected",
    [
        ("Kerala", (None, None)),
        (["Kerala", "Wayanad"], (None, None)),
        (42, (None, None)),
        ({"state": 5}, (None, None)),
        ({"state": "Kerala", "district": 12}, ("Kerala", None)),
        ({"state": ["Kerala"], "district": "Wayanad"}, (None, "Wayanad")),
    ],
)
def test_malformed_location_hint_is_dropped(location, expected, caplog):
    text = json.dumps({"category": "conflict", "location": location, "confidence": 60})
    with caplog.at_level("WARNING"):
        extracted = parse_extraction_response(text)

    assert extracted.category == IncidentCategory.CONFLICT
    assert (extracted.location.state, extracted.location.district) == expected
    assert any(r.levelname == "WARNING" for r in caplog.records)


@pytest.mark.parametrize("value", ["yes", "true", "maybe", 1, 2, 0, [True], {"x": 1}])
def test_only_json_true_sets_an_indicator(value, caplog):
    text = json.dumps(
        {"category": "poaching", "indicators": {"weapon": value, "injury": True}, "confidence": 70}
    )
    with caplog.at_level("WARNING"):
        extracted = parse_extraction_response(text)

    assert extracted.indicators.weapon is False
    assert extracted.indicators.injury is True
    assert extracted.indicators.active() == ["injury"]
    assert any("weapon" in r.getMessage() for r in caplog.records)


def test_malformed_indicators_block_reads_as_no_flags():
    extracted = parse_extraction_response('{"category": "fire", "indicators": ["fireSpread"], "confidence": 70}')
    assert extracted.indicators.active() == []


def test_markdown_fenced_json():
    text = 'Here you go:\n```json\n{"category": "conflict", "confidence": 78}\n```'
    assert parse_extraction_response(text).category == IncidentCategory.CONFLICT


def test_integral_float_confidence_is_coerced():
    assert parse_extraction_response('{"category": "fire", "confidence": 80.0}').confidence == 80


@pytest.mark.parametrize(
    "text",
    [
        "",
        "not json at all",
        '{"category": "fire", "confidence": 80',
        "[1, 2, 3]",
        '{"confidence": 80}',
        '{"category": "", "confidence": 80}',
        '{"category": "flood", "confidence": 80}',
        '{"category": "fire"}',
        '{"category": "fire", "confidence": 101}',
        '{"category": "fire", "confidence": -1}',
        '{"category": "fire", "confidence": "80"}',
        '{"category": "fire", "confidence": true}',
        '{"category": "fire", "confidence": 55.5}',
    ],
)
def test_invalid_responses_raise(text):
    with pytest.raises(ExtractionError):
        parse_extraction_response(text)


def test_wire_form_uses_contract_names():
    wire = parse_extraction_response('{"category": "fire", "confidence": 0}').to_wire()
    assert wire == {
        "category": "fire",
        "location": {"state": None, "district": None},
        "indicators": {"injury": False, "weapon": False, "fireSpread": False, "repeatEvent": False},
        "confidence": 0,
    }
