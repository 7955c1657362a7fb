import json
import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from wildwatch.core.exceptions import RiskPolicyError
from wildwatch.llm.models import INDICATOR_NAMES, IncidentCategory

logger = logging.getLogger("risk_policy")

# Weights evidenced by field reports; the remaining rules come from settings.
OBSERVED_CATEGORY_WEIGHTS = {
    IncidentCategory.FIRE: 30,
    IncidentCategory.POACHING: 40,
    IncidentCategory.CONFLICT: 25,
    IncidentCategory.HABITAT_LOSS: 20,
}
OBSERVED_INDICATOR_BONUSES = {
    "injury": 20,
    "weapon": 25,
    "fireSpread": 30,
}


class LevelThresholds(BaseModel):
    """Lower bounds (inclusive) of each level above Low."""
    model_config = ConfigDict(frozen=True)

    medium: int = 25
    high: int = 50
    critical: int = 75

    @model_validator(mode="after")
    def ascending(self):
        if not (0 < self.medium < self.high < self.critical):
            raise ValueError("thresholds must satisfy 0 < medium < high < critical")
        return self


class RiskPolicy(BaseModel):
    """
    Risk rule table: base weight per category, bonus per indicator flag and
    the level thresholds. Every category and every indicator must be listed.
    """
    model_config = ConfigDict(frozen=True)

    category_weights: Dict[IncidentCategory, int]
    indicator_bonuses: Dict[str, int]
    thresholds: LevelThresholds = Field(default_factory=LevelThresholds)

    @model_validator(mode="after")
    def complete_table(self):
        missing = [c.value for c in IncidentCategory if c not in self.category_weights]
        if missing:
            raise ValueError(f"category_weights missing: {', '.join(missing)}")

        unknown = sorted(set(self.indicator_bonuses) - set(INDICATOR_NAMES))
        if unknown:
            raise ValueError(f"indicator_bonuses has unknown flags: {', '.join(unknown)}")
        missing = [n for n in INDICATOR_NAMES if n not in self.indicator_bonuses]
        if missing:
            raise ValueError(f"indicator_bonuses missing: {', '.join(missing)}")

        weights = list(self.category_weights.values()) + list(self.indicator_bonuses.values())
        if any(w < 0 for w in weights):
            raise ValueError("weights must be non-negative")
        return self


def build_default_policy(
    weight_illegal_logging: int,
    weight_other: int,
    bonus_repeat_event: int,
) -> RiskPolicy:
    weights = dict(OBSERVED_CATEGORY_WEIGHTS)
    weights[IncidentCategory.ILLEGAL_LOGGING] = weight_illegal_logging
    weights[IncidentCategory.OTHER] = weight_other

    bonuses = dict(OBSERVED_INDICATOR_BONUSES)
    bonuses["repeatEvent"] = bonus_repeat_event

    return RiskPolicy(category_weights=weights, indicator_bonuses=bonuses)


def load_risk_policy(path: str) -> RiskPolicy:
    """JSON 파일에서 정책 로드. 형식 오류는 RiskPolicyError."""
    file_path = Path(path)
    if not file_path.exists():
        raise RiskPolicyError(f"Risk policy not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return RiskPolicy.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise RiskPolicyError(f"Invalid risk policy {file_path}: {e}") from e


def policy_from_settings(settings, path: Optional[str] = None) -> RiskPolicy:
    path = path or settings.RISK_POLICY_FILE
    if path:
        logger.info(f"Loading risk policy from {path}")
        return load_risk_policy(path)

    try:
        return build_default_policy(
            weight_illegal_logging=settings.WEIGHT_ILLEGAL_LOGGING,
            weight_other=settings.WEIGHT_OTHER,
            bonus_repeat_event=settings.BONUS_REPEAT_EVENT,
        )
    except ValidationError as e:
        raise RiskPolicyError(f"Invalid risk policy settings: {e}") from e
