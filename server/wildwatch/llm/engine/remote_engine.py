from wildwatch.llm.engine.base_engine import BaseEngine
from wildwatch.llm.model_gateway import ModelGateway
from wildwatch.llm.models import ExtractionRequest
from wildwatch.llm.prompt_manager import PromptManager


class RemoteLLMEngine(BaseEngine):
    """외부 LLM 서버(Ollama 등)를 호출하는 엔진"""

    name = "remote"

    def __init__(self, gateway: ModelGateway, prompt_manager: PromptManager = None):
        self.gateway = gateway
        self.prompt_manager = prompt_manager or PromptManager()

    async def generate(self, request: ExtractionRequest) -> str:
        prompt = self.prompt_manager.build_extraction_prompt(request.raw_text)
        return await self.gateway.generate(prompt)
