from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from wildwatch.pipeline.results import Err, ErrorKind, Ok, PipelineError, Result

REQUIRED_FIELDS = ("rawText", "state", "district")


class IncidentInput(BaseModel):
    """Validated submission. Values are kept exactly as submitted."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    raw_text: str = Field(alias="rawText")
    state: str
    district: str


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_incident_input(payload: Any) -> Result:
    """
    입력 검증 - 모든 규칙을 검사하고 위반된 필드를 전부 보고
    Returns Ok(IncidentInput) or Err(ValidationError).
    """
    # 빈 객체는 아래에서 필드별로 보고됨
    if not isinstance(payload, Mapping):
        return Err(PipelineError(ErrorKind.VALIDATION, "Input validation failed: No data provided"))

    errors = [
        f"{name} is required and must be a non-empty string"
        for name in REQUIRED_FIELDS
        if not _is_filled(payload.get(name))
    ]
    if errors:
        return Err(
            PipelineError(
                ErrorKind.VALIDATION,
                f"Input validation failed: {'; '.join(errors)}",
                errors,
            )
        )

    return Ok(
        IncidentInput(
            raw_text=payload["rawText"],
            state=payload["state"],
            district=payload["district"],
        )
    )
