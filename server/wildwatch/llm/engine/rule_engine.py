import json
import logging
import re
from typing import Dict, Any

from wildwatch.llm.engine.base_engine import BaseEngine
from wildwatch.llm.models import ExtractionRequest

logger = logging.getLogger(__name__)

# (category, keyword patterns, confidence) - 위에서부터 먼저 매칭되는 항목 사용
CATEGORY_RULES = [
    ("fire", [r"fire", r"burn", r"flame"], 80),
    ("poaching", [r"poach", r"hunt", r"trap"], 85),
    ("conflict", [r"elephant", r"tiger", r"conflict", r"crop"], 80),
    ("illegal_logging", [r"log", r"timber", r"cutting trees"], 78),
    ("habitat_loss", [r"habitat", r"deforest", r"land clear"], 75),
]
DEFAULT_CATEGORY = ("other", 75)

INDICATOR_RULES = {
    "injury": [r"injur", r"hurt", r"attack", r"wound"],
    "weapon": [r"gun", r"weapon", r"rifle", r"trap", r"\barmed\b"],
    "repeatEvent": [r"again", r"repeat", r"previous", r"recurring"],
}
FIRE_SPREAD_PATTERNS = [r"spread", r"wildfire"]
FIRE_SPREAD_CONFIDENCE = 85


def _matches(text: str, patterns) -> bool:
    return any(re.search(p, text) for p in patterns)


class RuleBasedEngine(BaseEngine):
    """
    키워드 기반 결정적(deterministic) 추출 엔진.
    외부 LLM 없이 동일 입력 -> 동일 출력. 출력 형식은 LLM 응답과 동일한 JSON 문자열.
    """

    name = "rule"

    async def generate(self, request: ExtractionRequest) -> str:
        return json.dumps(self.extract_payload(request.raw_text))

    def extract_payload(self, raw_text: str) -> Dict[str, Any]:
        text = raw_text.lower()
        category, confidence = DEFAULT_CATEGORY
        indicators = {"injury": False, "weapon": False, "fireSpread": False, "repeatEvent": False}

        for name, patterns, conf in CATEGORY_RULES:
            if _matches(text, patterns):
                category, confidence = name, conf
                break

        if category == "fire" and _matches(text, FIRE_SPREAD_PATTERNS):
            indicators["fireSpread"] = True
            confidence = FIRE_SPREAD_CONFIDENCE

        for flag, patterns in INDICATOR_RULES.items():
            if _matches(text, patterns):
                indicators[flag] = True

        logger.debug("[RuleBasedEngine] category=%s indicators=%s", category, indicators)
        return {
            "category": category,
            "location": {"state": None, "district": None},
            "indicators": indicators,
            "confidence": confidence,
        }
