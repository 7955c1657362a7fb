import asyncio
import logging

from wildwatch.core.exceptions import ExtractionError
from wildwatch.llm.engine.base_engine import BaseEngine
from wildwatch.llm.engine.remote_engine import RemoteLLMEngine
from wildwatch.llm.engine.rule_engine import RuleBasedEngine
from wildwatch.llm.model_gateway import ModelGateway
from wildwatch.llm.models import ExtractionRequest
from wildwatch.llm.utils.llm_response_handler import parse_extraction_response
from wildwatch.pipeline.results import Err, ErrorKind, Ok, PipelineError, Result

logger = logging.getLogger("extraction")

PUBLIC_FAILURE_MESSAGE = "Failed to extract incident data from text"


class ExtractionService:
    """
    Extraction adapter: raw text -> ExtractedAttributes.
    - 엔진 호출 실패, timeout, 스키마 불일치 모두 ExtractionError 로 분류
    - 재시도 없음
    """

    def __init__(self, engine: BaseEngine):
        self.engine = engine

    async def extract(self, raw_text: str) -> Result:
        request = ExtractionRequest(raw_text=raw_text)
        try:
            raw_resp = await self.engine.generate(request)
            extracted = parse_extraction_response(raw_resp)
        except ExtractionError as e:
            logger.warning(f"Extraction rejected ({self.engine.name}): {e}")
            return Err(PipelineError(ErrorKind.EXTRACTION, PUBLIC_FAILURE_MESSAGE, [str(e)]))
        except asyncio.TimeoutError:
            logger.warning(f"Extraction timed out ({self.engine.name})")
            return Err(
                PipelineError(ErrorKind.EXTRACTION, PUBLIC_FAILURE_MESSAGE, ["extraction timed out"])
            )
        except Exception as e:
            logger.warning(f"Extraction engine failed ({self.engine.name}): {e}")
            return Err(
                PipelineError(ErrorKind.EXTRACTION, PUBLIC_FAILURE_MESSAGE, [f"engine error: {e}"])
            )

        logger.info(
            f"Extracted category={extracted.category.value} confidence={extracted.confidence}"
        )
        return Ok(extracted)


def build_engine(settings) -> BaseEngine:
    if settings.LLM_MODE == "remote":
        gateway = ModelGateway(
            api_url=settings.LLM_API_URL,
            model_name=settings.LLM_MODEL_NAME,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )
        return RemoteLLMEngine(gateway)
    return RuleBasedEngine()


def build_extraction_service(settings) -> ExtractionService:
    engine = build_engine(settings)
    logger.info(f"Extraction engine: {engine.name}")
    return ExtractionService(engine)
