"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (log directory, lock policy) set before app imports
- A fresh dependency-injection state for every test
- A TestClient bound to a test app that wires the container on startup

Architecture:
- Unit tests (test/**/*_unit_test.py): build components directly from fixtures in
  test/service/conftest.py
- HTTP tests (test/**/test_*.py): go through the `client` fixture
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('SERVICE_NAME', 'cinema-booking-test')
    os.environ.setdefault('LOCK_ACQUIRE_TIMEOUT_SECONDS', '1.0')


_early_setup_test_environment()

from collections.abc import AsyncIterator, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.platform.logging.loguru_io import Logger  # noqa: E402


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """Minimal lifespan for testing - wiring only"""
    Logger.base.info('🧪 [Test App] Starting up...')
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Test App] Dependency injection wired')

    yield

    container.unwire()
    Logger.base.info('🧪 [Test App] Shutdown complete')


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    """Every test starts with empty in-memory repositories"""
    container.reset_singletons()
    yield
    container.reset_singletons()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')
    with TestClient(app) as test_client:
        yield test_client
