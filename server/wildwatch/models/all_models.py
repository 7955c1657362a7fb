import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, Text, TIMESTAMP, JSON, Index
from wildwatch.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Incident(Base):
    __tablename__ = "incidents"
    incident_id = Column(String, primary_key=True, default=lambda: f"inc-{uuid.uuid4()}")
    # server_default 는 초 단위라 정렬이 불안정 -> 애플리케이션에서 시각 지정
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)
    raw_text = Column(Text, nullable=False)
    state = Column(String, nullable=False)
    district = Column(String, nullable=False)
    extracted = Column(JSON, nullable=False)
    risk_score = Column(Integer, nullable=False)
    risk_level = Column(String, nullable=False)
    status = Column(String, nullable=False)

    __table_args__ = (
        Index("ix_incidents_location", "state", "district"),
        Index("ix_incidents_risk_level", "risk_level"),
        Index("ix_incidents_status", "status"),
        Index("ix_incidents_created_at", "created_at"),
    )
