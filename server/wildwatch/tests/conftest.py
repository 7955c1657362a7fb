import json
import os

# settings 는 import 시점에 읽히므로 가장 먼저 설정
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LLM_MODE"] = "rule"
os.environ.pop("RISK_POLICY_FILE", None)

import pytest

from wildwatch.core.config import settings
from wildwatch.core.database import Base, SessionLocal, engine
from wildwatch.llm.engine.base_engine import BaseEngine
from wildwatch.models import all_models  # noqa: F401
from wildwatch.pipeline.ingest_pipeline import IngestPipeline
from wildwatch.risk.policy import policy_from_settings
from wildwatch.services.extraction_service import ExtractionService


class StaticEngine(BaseEngine):
    """Returns a fixed response and records every request it receives."""

    name = "static"

    def __init__(self, response):
        self.response = response if isinstance(response, str) else json.dumps(response)
        self.requests = []

    async def generate(self, request):
        self.requests.append(request)
        return self.response


class FailingEngine(BaseEngine):
    name = "failing"

    def __init__(self, exc):
        self.exc = exc
        self.calls = 0

    async def generate(self, request):
        self.calls += 1
        raise self.exc


def extraction_payload(category="fire", confidence=80, location=None, **indicators):
    return {
        "category": category,
        "location": location or {"state": None, "district": None},
        "indicators": {
            "injury": indicators.get("injury", False),
            "weapon": indicators.get("weapon", False),
            "fireSpread": indicators.get("fireSpread", False),
            "repeatEvent": indicators.get("repeatEvent", False),
        },
        "confidence": confidence,
    }


class MemoryStore:
    def __init__(self, fail_with=None):
        self.saved = []
        self.fail_with = fail_with

    def save(self, record):
        if self.fail_with is not None:
            raise self.fail_with
        self.saved.append(record)
        return f"inc-test-{len(self.saved)}"


@pytest.fixture
def policy():
    return policy_from_settings(settings)


@pytest.fixture
def make_pipeline(policy):
    def _make(engine, store=None):
        return IngestPipeline(ExtractionService(engine), policy, store=store)

    return _make


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
