import json
import logging
import re

from pydantic import ValidationError

from wildwatch.core.exceptions import ExtractionError
from wildwatch.llm.models import ExtractedAttributes

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)
_OBJECT_RE = re.compile(r"(\{.*\})", re.DOTALL)


def extract_json_object(text: str) -> dict:
    """
    LLM 출력에서 JSON 객체를 꺼낸다.
    - Markdown 코드 블럭 제거 후 가장 바깥쪽 { ... } 만 파싱
    - 깨진 JSON 은 복구하지 않고 실패로 처리
    """
    if not isinstance(text, str) or not text.strip():
        raise ExtractionError("Empty extraction response")

    cleaned = _FENCE_RE.sub("", text)
    match = _OBJECT_RE.search(cleaned)
    if not match:
        raise ExtractionError("No JSON object in extraction response")

    try:
        data = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Malformed JSON in extraction response: {e.msg}") from e

    if not isinstance(data, dict):
        raise ExtractionError("Extraction response must be a JSON object")
    return data


def parse_extraction_response(text: str) -> ExtractedAttributes:
    data = extract_json_object(text)

    if not data.get("category"):
        raise ExtractionError("Missing category in extraction response")

    try:
        return ExtractedAttributes.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) or "response" for err in e.errors()
        )
        raise ExtractionError(f"Extraction response failed schema validation: {fields}") from e


def log_incident_decision(confidence: int, status: str, risk_level: str) -> None:
    """Incident 의사결정 기록"""
    logger.info(
        "[IncidentDecision] confidence=%d status=%s risk_level=%s",
        confidence,
        status,
        risk_level,
    )
