# pipeline/guardrail.py
"""
Review guardrail
- 추출 confidence 만으로 상태 결정 (risk level 과 무관)
"""

import logging

from wildwatch.pipeline.records import IncidentStatus

logger = logging.getLogger(__name__)

# Confidence 임계값
CONF_THRESHOLD_REVIEW = 40


def apply_review_guardrail(confidence: int, threshold: int = CONF_THRESHOLD_REVIEW) -> IncidentStatus:
    """
    - confidence < threshold: Needs Review
    - 그 외: Processed
    """
    if confidence < threshold:
        status = IncidentStatus.NEEDS_REVIEW
    else:
        status = IncidentStatus.PROCESSED

    logger.debug(f"[Guardrail] confidence={confidence} → status={status.value}")
    return status
