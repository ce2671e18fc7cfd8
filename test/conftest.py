"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: settings and the
loguru sinks are built at import time.

Layout:
- test/service/booking/unit/: use cases and domain rules against the in-memory Unit of Work
- test/service/booking/api/: HTTP surface via TestClient, DI container Unit of Work overridden
- test/service/booking/integration/: SQLAlchemy adapters against a SQLite database file
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # No PostgreSQL in tests; integration tests build their own engines
    os.environ['DATABASE_URL'] = 'sqlite+aiosqlite://'
    os.environ['SECRET_KEY'] = 'test_secret_key_for_hotel_booking_suite'
    os.environ['SERVICE_NAME'] = 'hotel-booking-test'


_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402

import pytest  # noqa: E402

from src.service.booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth  # noqa: E402
from test.service.booking.fake_unit_of_work import FakeUnitOfWork, InMemoryBookingStore  # noqa: E402


@pytest.fixture
def store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def uow(store: InMemoryBookingStore) -> FakeUnitOfWork:
    return FakeUnitOfWork(store=store)


@pytest.fixture
def make_token() -> Callable[[int], str]:
    jwt_auth = JwtAuth()

    def _make_token(user_id: int) -> str:
        return jwt_auth.create_jwt_token(user_id=user_id)

    return _make_token
