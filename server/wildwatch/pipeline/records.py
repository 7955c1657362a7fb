from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wildwatch.llm.models import ExtractedAttributes
from wildwatch.risk.engine import RiskAssessment, RiskLevel


class IncidentStatus(str, Enum):
    PROCESSED = "Processed"
    NEEDS_REVIEW = "Needs Review"


class Location(BaseModel):
    """Official location as submitted by the reporter."""
    model_config = ConfigDict(frozen=True)

    state: str
    district: str


class IncidentRecord(BaseModel):
    """Fully assembled incident, handed to the store as-is."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    raw_text: str = Field(alias="rawText")
    location: Location
    extracted: ExtractedAttributes
    risk: RiskAssessment
    status: IncidentStatus


class IncidentSummary(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    incident_id: Optional[str] = Field(default=None, alias="incidentId")
    message: str = "Incident recorded"
    risk_level: RiskLevel = Field(alias="riskLevel")
    risk_score: int = Field(alias="riskScore")
    confidence: int
    status: IncidentStatus
