import random

import pytest
from fastapi.testclient import TestClient

from config import Settings
from core.wheel_registry import WheelRegistry
from core.wheel_service import WheelService
from tests.helpers import FIXED_NOW


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def registry():
    return WheelRegistry()


@pytest.fixture
def service(registry, settings):
    return WheelService(
        registry,
        rng=random.Random(1234),
        clock=lambda: FIXED_NOW,
        settings=settings
    )


@pytest.fixture
def client(service):
    from main import app

    with TestClient(app) as test_client:
        # lifespan 建立的 service 換成可重現的版本
        app.state.wheel_service = service
        yield test_client
