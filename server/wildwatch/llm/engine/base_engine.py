# llm/engine/base_engine.py
from abc import ABC, abstractmethod
from wildwatch.llm.models import ExtractionRequest


class BaseEngine(ABC):
    """공통 추출 엔진 인터페이스 (text -> raw JSON text)"""

    name: str = "base"

    @abstractmethod
    async def generate(self, request: ExtractionRequest) -> str:
        pass
