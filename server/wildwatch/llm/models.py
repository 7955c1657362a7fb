# llm/models.py
import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class IncidentCategory(str, Enum):
    FIRE = "fire"
    POACHING = "poaching"
    CONFLICT = "conflict"
    HABITAT_LOSS = "habitat_loss"
    ILLEGAL_LOGGING = "illegal_logging"
    OTHER = "other"


INDICATOR_NAMES = ("injury", "weapon", "fireSpread", "repeatEvent")


class ExtractionRequest(BaseModel):
    """
    추출 엔진에 보내는 요청.
    - 사용자가 입력한 공식 위치(state/district)는 의도적으로 포함하지 않음
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    raw_text: str = Field(alias="rawText")


class LocationHint(BaseModel):
    """Location mentioned in the report text. Advisory only."""
    model_config = ConfigDict(frozen=True)

    state: Optional[str] = None
    district: Optional[str] = None

    @field_validator("state", "district", mode="before")
    def blank_to_none(cls, v, info):
        if v is None or v == "":
            return None
        if not isinstance(v, str):
            # 참고용 필드이므로 추출 전체를 실패시키지 않음
            logger.warning(f"Ignoring non-string location.{info.field_name}: {v!r}")
            return None
        return v


class Indicators(BaseModel):
    """
    Flag rule: only a JSON ``true`` sets a flag. Anything else (false, null,
    strings, numbers) reads as false.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    injury: bool = False
    weapon: bool = False
    fire_spread: bool = Field(default=False, alias="fireSpread")
    repeat_event: bool = Field(default=False, alias="repeatEvent")

    @field_validator("injury", "weapon", "fire_spread", "repeat_event", mode="before")
    def only_true_sets_flag(cls, v, info):
        if isinstance(v, bool):
            return v
        if v is not None:
            logger.warning(f"Indicator {info.field_name} is not a boolean ({v!r}), reading as false")
        return False

    def active(self) -> list:
        """Wire names of the flags that are set."""
        dumped = self.model_dump(by_alias=True)
        return [name for name in INDICATOR_NAMES if dumped[name]]


class ExtractedAttributes(BaseModel):
    """
    추출 엔진 최종 출력 스키마.
    - category: 고정된 enum 외 값은 거부
    - confidence: 0~100 정수
    - indicators / location 은 없으면 false / null
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: IncidentCategory
    location: LocationHint = Field(default_factory=LocationHint)
    indicators: Indicators = Field(default_factory=Indicators)
    confidence: int = Field(..., ge=0, le=100)

    @field_validator("location", "indicators", mode="before")
    def null_to_default(cls, v, info):
        if isinstance(v, (dict, LocationHint, Indicators)):
            return v
        if v is not None:
            logger.warning(f"Ignoring malformed {info.field_name}: {v!r}")
        return LocationHint() if info.field_name == "location" else Indicators()

    @field_validator("confidence", mode="before")
    def numeric_confidence(cls, v):
        # bool 은 int 의 하위 타입이므로 명시적으로 거부
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("confidence must be a number")
        if isinstance(v, float):
            if not v.is_integer():
                raise ValueError("confidence must be a whole number")
            return int(v)
        return v

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
