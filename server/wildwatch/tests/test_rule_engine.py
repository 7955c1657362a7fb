import asyncio
import json

import pytest

from wildwatch.llm.engine.rule_engine import RuleBasedEngine
from wildwatch.llm.models import ExtractionRequest
from wildwatch.llm.utils.llm_response_handler import parse_extraction_response


def run_engine(text):
    raw = asyncio.run(RuleBasedEngine().generate(ExtractionRequest(raw_text=text)))
    return parse_extraction_response(raw)


@pytest.mark.parametrize(
    "text, category, active, confidence",
    [
        (
            "Forest fire spreading rapidly near wildlife reserve, flames visible from 2km away",
            "fire",
            ["fireSpread"],
            85,
        ),
        ("Small grass fire near the gate, put out quickly", "fire", [], 80),
        (
            "Armed poachers caught hunting elephants, one ranger injured during confrontation",
            "poaching",
            ["injury", "weapon"],
            85,
        ),
        (
            "Elephants entered paddy field near Masinagudi, farmer injured while trying to chase them away",
            "conflict",
            ["injury"],
            80,
        ),
        (
            "Noticed some deforestation activity in buffer zone, appears to be slow land clearing",
            "habitat_loss",
            [],
            75,
        ),
        ("Timber trucks leaving the sanctuary at night again", "illegal_logging", ["repeatEvent"], 78),
        ("Strange noises heard near the river", "other", [], 75),
    ],
)
def test_keyword_extraction(text, category, active, confidence):
    extracted = run_engine(text)
    assert extracted.category.value == category
    assert extracted.indicators.active() == active
    assert extracted.confidence == confidence


def test_spread_without_fire_is_not_fire_spread():
    extracted = run_engine("Invasive weeds spread across the habitat")
    assert extracted.category.value == "habitat_loss"
    assert extracted.indicators.fire_spread is False


def test_harmed_is_not_armed():
    extracted = run_engine("Tiger harmed a calf near the village")
    assert extracted.indicators.weapon is False


def test_engine_never_emits_location():
    payload = json.loads(
        asyncio.run(RuleBasedEngine().generate(ExtractionRequest(raw_text="Fire in Wayanad, Kerala")))
    )
    assert payload["location"] == {"state": None, "district": None}


def test_deterministic():
    text = "Leopard attacked cattle again, villagers with rifles gathered"
    assert run_engine(text) == run_engine(text)
