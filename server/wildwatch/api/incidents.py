from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from wildwatch.controllers.incident_controller import IncidentController
from wildwatch.core.config import settings
from wildwatch.core.database import get_db
from wildwatch.risk.policy import RiskPolicy, policy_from_settings
from wildwatch.schemas.all_schemas import (
    ErrorResponse,
    IncidentCreateRequest,
    IncidentCreateResponse,
    IncidentListResponse,
    IncidentOut,
)
from wildwatch.services.extraction_service import ExtractionService, build_extraction_service

router = APIRouter(prefix="/api/incidents", tags=["Incidents"])


# 서비스 인스턴스 (프로세스당 1개, 읽기 전용)
@lru_cache
def get_extraction_service() -> ExtractionService:
    return build_extraction_service(settings)


@lru_cache
def get_risk_policy() -> RiskPolicy:
    return policy_from_settings(settings)


def get_controller(
    db: Session = Depends(get_db),
    extraction: ExtractionService = Depends(get_extraction_service),
    policy: RiskPolicy = Depends(get_risk_policy),
) -> IncidentController:
    return IncidentController(db, extraction, policy)


@router.post(
    "",
    status_code=201,
    response_model=IncidentCreateResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_incident(
    request: IncidentCreateRequest,
    ctrl: IncidentController = Depends(get_controller),
):
    """
    신규 사고 접수: validate -> extract -> score -> store
    """
    return await ctrl.create(request.model_dump(by_alias=True))


@router.get("", response_model=IncidentListResponse)
def list_incidents(
    state: Optional[str] = None,
    district: Optional[str] = None,
    risk_level: Optional[str] = Query(None, alias="riskLevel"),
    status: Optional[str] = None,
    limit: int = Query(settings.INCIDENT_LIST_LIMIT, ge=1, le=500),
    ctrl: IncidentController = Depends(get_controller),
):
    """
    사고 목록 조회 (최신순)
    """
    return ctrl.list(state, district, risk_level, status, limit)


@router.get("/{incident_id}", response_model=IncidentOut, responses={404: {"model": ErrorResponse}})
def get_incident(incident_id: str, ctrl: IncidentController = Depends(get_controller)):
    return ctrl.get(incident_id)
