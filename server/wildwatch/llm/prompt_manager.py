import logging
from string import Template
from typing import Dict, Optional
from pathlib import Path

logger = logging.getLogger("prompt_manager")


class PromptManager:
    """
    추출 프롬프트 템플릿을 관리하는 클래스
    """

    def __init__(self, base_path: Optional[str] = None):
        # 경로가 주어지지 않으면, 현재 파일 위치 기준으로 templates 폴더를 찾음
        if base_path is None:
            self.base_path = Path(__file__).resolve().parent / "prompt_templates"
        else:
            self.base_path = Path(base_path)

        self.cache: Dict[str, str] = {}

    def load_prompt(self, name: str) -> str:
        """
        name='extraction' -> extraction_prompt.txt 로드
        """
        if name in self.cache:
            return self.cache[name]

        file_path = self.base_path / f"{name}_prompt.txt"

        if not file_path.exists():
            raise FileNotFoundError(f"Prompt not found: {file_path}")

        with file_path.open("r", encoding="utf-8") as f:
            content = f.read()

        self.cache[name] = content
        return content

    def build_extraction_prompt(self, incident_text: str) -> str:
        # The official location never goes into the prompt.
        tpl = self.load_prompt("extraction")
        return Template(tpl).safe_substitute(incident_text=incident_text)
