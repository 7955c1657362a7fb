"""
Incident ingestion pipeline.

Strict order: validate -> extract -> score -> assemble -> persist.
Each stage returns Ok/Err; the first Err ends the run. Persistence is the last
step, so a failed or cancelled run never leaves a partial record behind.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

from wildwatch.llm.models import ExtractedAttributes
from wildwatch.llm.utils.llm_response_handler import log_incident_decision
from wildwatch.pipeline.guardrail import CONF_THRESHOLD_REVIEW, apply_review_guardrail
from wildwatch.pipeline.records import IncidentRecord, IncidentSummary, Location
from wildwatch.pipeline.results import Err, ErrorKind, Ok, PipelineError, Result
from wildwatch.pipeline.validator import IncidentInput, validate_incident_input
from wildwatch.risk.engine import RiskAssessment, calculate_risk
from wildwatch.risk.policy import RiskPolicy
from wildwatch.services.extraction_service import ExtractionService

logger = logging.getLogger("pipeline")


class PipelineStage(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    EXTRACTED = "extracted"
    SCORED = "scored"
    ASSEMBLED = "assembled"
    PERSISTED = "persisted"
    FAILED = "failed"


class RecordStore(Protocol):
    def save(self, record: IncidentRecord) -> str:
        ...


@dataclass(frozen=True)
class PipelineOutput:
    record: IncidentRecord
    summary: IncidentSummary


def assemble_record(
    incident: IncidentInput,
    extracted: ExtractedAttributes,
    risk: RiskAssessment,
    review_threshold: int = CONF_THRESHOLD_REVIEW,
) -> IncidentRecord:
    # 위치는 항상 사용자 입력 사용, 추출된 위치는 extracted 안에만 보관
    return IncidentRecord(
        raw_text=incident.raw_text,
        location=Location(state=incident.state, district=incident.district),
        extracted=extracted,
        risk=risk,
        status=apply_review_guardrail(extracted.confidence, review_threshold),
    )


class IngestPipeline:
    def __init__(
        self,
        extraction: ExtractionService,
        policy: RiskPolicy,
        store: Optional[RecordStore] = None,
        review_threshold: int = CONF_THRESHOLD_REVIEW,
    ):
        self.extraction = extraction
        self.policy = policy
        self.store = store
        self.review_threshold = review_threshold

    def _fail(self, stage: PipelineStage, error: PipelineError) -> Err:
        logger.info(f"Pipeline failed at {stage.value}: {error.kind.value} - {error.message}")
        return Err(error)

    async def process(self, payload: Any) -> Result:
        stage = PipelineStage.RECEIVED

        validated = validate_incident_input(payload)
        if not validated.ok:
            return self._fail(stage, validated.error)
        incident = validated.value
        stage = PipelineStage.VALIDATED

        # 추출 요청에는 raw_text 만 전달
        extracted = await self.extraction.extract(incident.raw_text)
        if not extracted.ok:
            return self._fail(stage, extracted.error)
        attributes = extracted.value
        stage = PipelineStage.EXTRACTED

        try:
            risk = calculate_risk(attributes, self.policy)
            stage = PipelineStage.SCORED

            record = assemble_record(incident, attributes, risk, self.review_threshold)
            stage = PipelineStage.ASSEMBLED

            incident_id = self.store.save(record) if self.store is not None else None
            if self.store is not None:
                stage = PipelineStage.PERSISTED
        except Exception as e:
            logger.error(f"Unexpected failure after {stage.value}: {e}", exc_info=True)
            return self._fail(stage, PipelineError(ErrorKind.PROCESSING, str(e) or type(e).__name__))

        log_incident_decision(attributes.confidence, record.status.value, risk.level.value)
        logger.info(f"Pipeline completed at {stage.value}: risk={risk.level.value}({risk.score})")

        summary = IncidentSummary(
            incident_id=incident_id,
            risk_level=risk.level,
            risk_score=risk.score,
            confidence=attributes.confidence,
            status=record.status,
        )
        return Ok(PipelineOutput(record=record, summary=summary))
