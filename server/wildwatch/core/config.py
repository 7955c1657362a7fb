from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./wildwatch.db"

    # Optional
    ENV_STATE: str = "dev"
    INCIDENT_LIST_LIMIT: int = 50

    # Extraction Config
    LLM_MODE: Literal["rule", "remote"] = "rule"
    LLM_API_URL: str = "http://localhost:11434/api/generate"
    LLM_MODEL_NAME: str = "mistral"
    LLM_TIMEOUT_SECONDS: float = 30.0

    # Review policy
    REVIEW_CONFIDENCE_THRESHOLD: int = 40

    # Risk policy
    # Rules without observed fixtures are configured here, not inferred.
    RISK_POLICY_FILE: Optional[str] = None
    WEIGHT_ILLEGAL_LOGGING: int = 35
    WEIGHT_OTHER: int = 10
    BONUS_REPEAT_EVENT: int = 15

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
