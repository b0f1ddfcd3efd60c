"""Runs the load harness in-process against the seeded app."""

import asyncio

import httpx

import harness
from ranker.app import create_app
from ranker.core.config import RankerConfig


def test_every_load_case_passes(db_client, seeded):
    app = create_app(RankerConfig(log_level="error"), db_client)
    config = harness.HarnessConfig(base_url="http://ranker.test", requests=3, concurrency=1)

    reporter = asyncio.run(harness.main(config, transport=httpx.ASGITransport(app=app)))

    assert len(reporter.results) == len(harness.LOAD_CASES)
    failures = [(r.case_name, r.error) for r in reporter.results if r.status != "PASS"]
    assert failures == []


def test_load_case_randomizes_params_and_ids():
    case = harness.LoadCase(
        name="detail", endpoint="/api/professors/{id}", randomize={"id": [7], "page": [2]}
    )
    assert case.request_endpoint() == "/api/professors/7"
    assert case.request_params() == {"id": 7, "page": 2}
