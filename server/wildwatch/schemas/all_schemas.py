from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Any


class BaseSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class IncidentCreateRequest(BaseSchema):
    # 타입 검사는 파이프라인 validator 에서 수행 (400 + 필드별 메시지)
    raw_text: Optional[Any] = Field(default=None, alias="rawText")
    state: Optional[Any] = None
    district: Optional[Any] = None


class IncidentCreateResponse(BaseSchema):
    incident_id: Optional[str] = Field(default=None, alias="incidentId")
    message: str
    risk_level: str = Field(alias="riskLevel")
    risk_score: int = Field(alias="riskScore")
    confidence: int
    status: str


class ErrorResponse(BaseSchema):
    error: str
    message: str
    details: List[str] = []


class LocationOut(BaseSchema):
    state: str
    district: str


class RiskOut(BaseSchema):
    score: int
    level: str


class IncidentOut(BaseSchema):
    incident_id: str = Field(alias="incidentId")
    raw_text: str = Field(alias="rawText")
    location: LocationOut
    extracted: dict
    risk: RiskOut
    status: str
    created_at: Optional[str] = Field(default=None, alias="createdAt")


class IncidentListResponse(BaseSchema):
    count: int
    incidents: List[IncidentOut]
