"""
Test Configuration and Fixtures

- Unit tests (`*_unit_test.py`) use mocks/fakes only.
- Controller tests drive the FastAPI test app with repositories overridden
  in the DI container.
- Integration tests (`test/service/booking/integration/`) need a running
  PostgreSQL and only run when TEST_DATABASE=1.
"""

# =============================================================================
# Environment setup MUST happen before any application import: settings and
# the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    os.environ.setdefault('POSTGRES_DB', 'event_booking_test')
    os.environ.setdefault('DEBUG', 'false')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Small pools for tests
    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')
    os.environ.setdefault('ASYNCPG_POOL_MIN_SIZE', '2')
    os.environ.setdefault('ASYNCPG_POOL_MAX_SIZE', '10')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from test.test_main import app  # noqa: E402


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if '/integration/' in item.path.as_posix():
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client with the lifespan running (container wired)."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
