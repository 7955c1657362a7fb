import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from wildwatch.models.all_models import Incident
from wildwatch.pipeline.records import IncidentRecord

logger = logging.getLogger("incident_store")


class IncidentStore:
    """incidents 테이블 저장/조회"""

    def __init__(self, db: Session):
        self.db = db

    def save(self, record: IncidentRecord) -> str:
        row = Incident(
            raw_text=record.raw_text,
            state=record.location.state,
            district=record.location.district,
            extracted=record.extracted.to_wire(),
            risk_score=record.risk.score,
            risk_level=record.risk.level.value,
            status=record.status.value,
        )
        self.db.add(row)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"✅ Incident stored: {row.incident_id}")
        return row.incident_id

    def get(self, incident_id: str) -> Optional[Incident]:
        return self.db.query(Incident).filter(Incident.incident_id == incident_id).first()

    def list(
        self,
        state: Optional[str] = None,
        district: Optional[str] = None,
        risk_level: Optional[str] = None,
        status: Optional[str] = None,
        limit: int = 50,
    ) -> List[Incident]:
        query = self.db.query(Incident)
        if state:
            query = query.filter(Incident.state == state)
        if district:
            query = query.filter(Incident.district == district)
        if risk_level:
            query = query.filter(Incident.risk_level == risk_level)
        if status:
            query = query.filter(Incident.status == status)
        return query.order_by(Incident.created_at.desc()).limit(limit).all()


def incident_to_dict(row: Incident) -> dict:
    return {
        "incidentId": row.incident_id,
        "rawText": row.raw_text,
        "location": {"state": row.state, "district": row.district},
        "extracted": row.extracted,
        "risk": {"score": row.risk_score, "level": row.risk_level},
        "status": row.status,
        "createdAt": row.created_at.isoformat() if row.created_at else None,
    }
