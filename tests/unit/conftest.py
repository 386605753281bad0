"""Shared fixtures for unit tests.

This module provides:
- A fake AutoML client recording every call it receives
- Settings and service fixtures bound to a test project
"""

import pytest
from loguru import logger

from automl_video_explorer.core.settings import ExplorerSettings
from automl_video_explorer.services import ModelManagementService

from tests.unit.fakes import (
    PROJECT_ID,
    REGION,
    FakeAutoMLClient,
    make_evaluation,
    make_model,
    make_operation,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop loguru handlers added by a test so they never outlive it."""
    yield
    logger.remove()


@pytest.fixture
def settings() -> ExplorerSettings:
    """Settings for the test project, ignoring the environment and .env."""
    return ExplorerSettings(
        project_id=PROJECT_ID,
        region_name=REGION,
        _env_file=None,
    )


@pytest.fixture
def fake_client() -> FakeAutoMLClient:
    """Fake client holding two models, their evaluations and two operations."""
    return FakeAutoMLClient(
        models=[make_model("VCN1001", "first"), make_model("VCN1002", "second")],
        evaluations=[
            make_evaluation("VCN1001", "1111", annotation_spec_id="cat1"),
            make_evaluation("VCN1001", "2222"),
            make_evaluation("VCN1001", "3333", annotation_spec_id="cat2"),
        ],
        operations=[
            make_operation("VCN-train-0"),
            make_operation(
                "VCN-train-9",
                done=True,
                error={"code": 3, "message": "Dataset has too few videos"},
            ),
        ],
    )


@pytest.fixture
def service(settings, fake_client) -> ModelManagementService:
    """Model management service wired to the fake client."""
    return ModelManagementService(settings, fake_client)


@pytest.fixture
def cli_env() -> dict[str, str | None]:
    """Environment for CLI invocations."""
    return {"PROJECT_ID": PROJECT_ID, "REGION_NAME": REGION, "LOG_LEVEL": None}
