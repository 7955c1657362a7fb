"""Rule-based risk scoring.

Pure functions: the same extracted attributes and policy always give the same
assessment. No I/O.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from wildwatch.llm.models import ExtractedAttributes
from wildwatch.risk.policy import LevelThresholds, RiskPolicy


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class RiskAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0)
    level: RiskLevel


def classify_risk_level(score: int, thresholds: LevelThresholds) -> RiskLevel:
    """Map a score onto a level. Bounds are inclusive on the lower side."""
    if score >= thresholds.critical:
        return RiskLevel.CRITICAL
    if score >= thresholds.high:
        return RiskLevel.HIGH
    if score >= thresholds.medium:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def calculate_score(extracted: ExtractedAttributes, policy: RiskPolicy) -> int:
    score = policy.category_weights[extracted.category]
    for flag in extracted.indicators.active():
        score += policy.indicator_bonuses[flag]
    # no upper clamp
    return score


def calculate_risk(extracted: ExtractedAttributes, policy: RiskPolicy) -> RiskAssessment:
    score = calculate_score(extracted, policy)
    return RiskAssessment(score=score, level=classify_risk_level(score, policy.thresholds))
