# 파이프라인 시나리오 실행 (DB 없이, rule 엔진 사용)
# python server/scripts/run_scenarios.py

import asyncio

from wildwatch.core.config import settings
from wildwatch.llm.engine.rule_engine import RuleBasedEngine
from wildwatch.pipeline.ingest_pipeline import IngestPipeline
from wildwatch.risk.policy import policy_from_settings
from wildwatch.services.extraction_service import ExtractionService

SCENARIOS = [
    (
        "Fire with spread",
        {
            "rawText": "Forest fire spreading rapidly near wildlife reserve, flames visible from 2km away",
            "state": "Karnataka",
            "district": "Uttara Kannada",
        },
        "High",
    ),
    (
        "Armed poaching with injury",
        {
            "rawText": "Armed poachers caught hunting elephants, one ranger injured during confrontation",
            "state": "Assam",
            "district": "Kaziranga",
        },
        "Critical",
    ),
    (
        "Human-wildlife conflict with injury",
        {
            "rawText": "Elephants entered paddy field near Masinagudi, farmer injured while trying to chase them away",
            "state": "Tamil Nadu",
            "district": "Nilgiris",
        },
        "Medium",
    ),
    (
        "Habitat loss observation",
        {
            "rawText": "Noticed some deforestation activity in buffer zone, appears to be slow land clearing",
            "state": "Kerala",
            "district": "Wayanad",
        },
        "Low",
    ),
    (
        "Missing state",
        {"rawText": "Some incident text", "district": "SomeDistrict"},
        "ValidationError",
    ),
    (
        "Blank report text",
        {"rawText": "   ", "state": "TestState", "district": "TestDistrict"},
        "ValidationError",
    ),
]


async def main():
    pipeline = IngestPipeline(
        ExtractionService(RuleBasedEngine()),
        policy_from_settings(settings),
        review_threshold=settings.REVIEW_CONFIDENCE_THRESHOLD,
    )

    passed = 0
    for name, payload, expected in SCENARIOS:
        result = await pipeline.process(payload)
        if result.ok:
            summary = result.value.summary
            got = summary.risk_level.value
            print(f"\n=== {name} ===")
            print("Risk:", got, f"(score {summary.risk_score})")
            print("Confidence:", summary.confidence)
            print("Status:", summary.status.value)
        else:
            got = result.error.kind.value
            print(f"\n=== {name} ===")
            print("Error:", got, "-", result.error.message)

        ok = got == expected
        passed += ok
        print("Expected:", expected, "✓" if ok else "✗")

    print(f"\n{passed}/{len(SCENARIOS)} scenarios matched")


if __name__ == "__main__":
    asyncio.run(main())
