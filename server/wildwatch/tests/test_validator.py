# tests/test_validator.py
import pytest

from wildwatch.pipeline.results import ErrorKind
from wildwatch.pipeline.validator import validate_incident_input


def test_valid_input_is_kept_verbatim():
    result = validate_incident_input(
        {"rawText": "  Fire near the lake  ", "state": "Kerala ", "district": "Wayanad"}
    )
    assert result.ok
    assert result.value.raw_text == "  Fire near the lake  "
    assert result.value.state == "Kerala "
    assert result.value.district == "Wayanad"


@pytest.mark.parametrize("field", ["rawText", "state", "district"])
@pytest.mark.parametrize("bad_value", [None, "", "   ", "\n\t", 42, ["text"]])
def test_missing_or_blank_field_fails(field, bad_value):
    payload = {"rawText": "Poachers seen", "state": "Assam", "district": "Kaziranga"}
    payload[field] = bad_value

    result = validate_incident_input(payload)

    assert not result.ok
    assert result.error.kind == ErrorKind.VALIDATION
    assert result.error.details == [f"{field} is required and must be a non-empty string"]


def test_omitted_field_is_named():
    result = validate_incident_input({"rawText": "Some incident text", "district": "SomeDistrict"})
    assert not result.ok
    assert "state" in result.error.message


def test_every_violation_is_reported():
    result = validate_incident_input({"rawText": " ", "state": None, "district": 3})
    assert not result.ok
    assert len(result.error.details) == 3


@pytest.mark.parametrize("payload", [None, "rawText=fire", ["a", "b"]])
def test_no_data(payload):
    result = validate_incident_input(payload)
    assert not result.ok
    assert result.error.kind == ErrorKind.VALIDATION
    assert "No data provided" in result.error.message


def test_empty_object_names_every_field():
    result = validate_incident_input({})
    assert not result.ok
    assert result.error.kind == ErrorKind.VALIDATION
    assert result.error.details == [
        "rawText is required and must be a non-empty string",
        "state is required and must be a non-empty string",
        "district is required and must be a non-empty string",
    ]
    assert "No data provided" not in result.error.message
