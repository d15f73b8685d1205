"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import pytest_asyncio

from ideanest.client import EvaluationServiceClient
from ideanest.config import Settings
from ideanest.notifications import NotificationQueue
from ideanest.orchestrator import IdeaOrchestrator
from ideanest.session import SessionState

BASE_URL = "https://ideas.test/api"
FIXTURES = Path(__file__).parent / "fixtures"

PLANTPAL_DESCRIPTION = (
    "PlantPal pairs a clip-on soil sensor with a phone app that tells busy plant owners "
    "exactly when and how much to water each plant in their home, daily."
)


def load_fixture(name: str) -> dict[str, object]:
    return json.loads((FIXTURES / name).read_text())  # type: ignore[no-any-return]


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        api_base_url=BASE_URL,
        api_key="test-key",
        request_timeout=5.0,
        evaluate_fallback_delay=0.01,
        auxiliary_fallback_delay=0.01,
        auxiliary_substitute_delay=0.01,
        redis_url="",
        log_level="DEBUG",
        log_format="console",
        _env_file=None,
    )


@pytest.fixture()
def session() -> SessionState:
    return SessionState()


@pytest.fixture()
def notifications() -> NotificationQueue:
    return NotificationQueue()


@pytest.fixture()
def evaluation_payload() -> dict[str, object]:
    return load_fixture("evaluation.json")


@pytest_asyncio.fixture
async def service(settings: Settings):
    client = EvaluationServiceClient.from_settings(settings)
    yield client
    await client.aclose()


@pytest.fixture()
def orchestrator(
    service: EvaluationServiceClient,
    session: SessionState,
    notifications: NotificationQueue,
    settings: Settings,
) -> IdeaOrchestrator:
    return IdeaOrchestrator(
        service=service,
        session=session,
        notifications=notifications,
        settings=settings,
    )
