import time
import logging
import asyncio

import requests

logger = logging.getLogger("ModelGateway")


class ModelGateway:
    """
    LLM 호출 게이트웨이 (Ollama 호환 /api/generate)
    - 동기 HTTP 호출을 worker thread 에서 실행, timeout 적용
    - 실패는 그대로 전파 (재시도/fallback 없음)
    - 모델 호출 성능 모니터링(metrics logging)
    """

    def __init__(
        self,
        api_url: str,
        model_name: str,
        timeout: float = 30,
        monitoring_enabled: bool = True,
        session: requests.Session = None,
    ):
        self.api_url = api_url
        self.model_name = model_name
        self.timeout = timeout
        self.monitoring_enabled = monitoring_enabled
        # 테스트용 주입 세션. 없으면 호출마다 새 세션 생성
        self.session = session

    def _post(self, prompt: str) -> str:
        payload = {
            "model": self.model_name,
            "prompt": prompt,
            "stream": False,
            "format": "json",
            "options": {"temperature": 0},
        }
        if self.session is not None:
            return self._send(self.session, payload)
        # requests.Session is not thread-safe; each worker-thread call owns one
        with requests.Session() as session:
            return self._send(session, payload)

    def _send(self, session, payload: dict) -> str:
        resp = session.post(self.api_url, json=payload, timeout=self.timeout)
        resp.raise_for_status()
        body = resp.json()
        if isinstance(body, dict) and "response" in body:
            return body["response"]
        # OpenAI 호환 응답
        choices = body.get("choices", []) if isinstance(body, dict) else []
        if choices:
            return choices[0].get("message", {}).get("content", "") or choices[0].get("text", "")
        raise ValueError("Unrecognised LLM response body")

    async def generate(self, prompt: str) -> str:
        """
        LLM 생성 요청 (비동기 래퍼)
        """
        start = time.time()
        output = await asyncio.wait_for(
            asyncio.to_thread(self._post, prompt), timeout=self.timeout
        )

        duration = time.time() - start
        if self.monitoring_enabled:
            self.log_metrics(prompt_chars=len(prompt), duration=duration)

        return output

    def log_metrics(self, prompt_chars: int, duration: float):
        logger.info(f"[Metrics] Prompt chars: {prompt_chars}, Duration: {duration:.2f}s")
