import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from wildwatch.core.config import settings
from wildwatch.pipeline.ingest_pipeline import IngestPipeline
from wildwatch.pipeline.results import ErrorKind
from wildwatch.risk.policy import RiskPolicy
from wildwatch.services.extraction_service import ExtractionService
from wildwatch.services.incident_store import IncidentStore, incident_to_dict

logger = logging.getLogger("incident_ctrl")

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.EXTRACTION: 502,
    ErrorKind.PROCESSING: 500,
}


class IncidentController:
    def __init__(self, db: Session, extraction: ExtractionService, policy: RiskPolicy):
        self.store = IncidentStore(db)
        self.pipeline = IngestPipeline(
            extraction,
            policy,
            store=self.store,
            review_threshold=settings.REVIEW_CONFIDENCE_THRESHOLD,
        )

    async def create(self, payload: dict) -> dict:
        result = await self.pipeline.process(payload)
        if not result.ok:
            raise HTTPException(STATUS_BY_KIND[result.error.kind], result.error.to_dict())
        return result.value.summary.model_dump(mode="json", by_alias=True)

    def list(
        self,
        state: Optional[str],
        district: Optional[str],
        risk_level: Optional[str],
        status: Optional[str],
        limit: int,
    ) -> dict:
        rows = self.store.list(state, district, risk_level, status, limit)
        return {"count": len(rows), "incidents": [incident_to_dict(r) for r in rows]}

    def get(self, incident_id: str) -> dict:
        row = self.store.get(incident_id)
        if not row:
            raise HTTPException(404, {"error": "Not Found", "message": "Incident not found"})
        return incident_to_dict(row)
