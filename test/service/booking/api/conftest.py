from collections.abc import Callable, Generator

from dependency_injector import providers
from fastapi.testclient import TestClient
import pytest

from src.platform.config.di import container
from test.service.booking.fake_unit_of_work import FakeUnitOfWork, InMemoryBookingStore
from test.test_main import app


@pytest.fixture
def client(store: InMemoryBookingStore) -> Generator[TestClient, None, None]:
    """TestClient whose requests read and write the in-memory store"""
    container.unit_of_work.override(providers.Factory(FakeUnitOfWork, store=store))
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        container.unit_of_work.reset_override()


@pytest.fixture
def auth_headers(make_token: Callable[[int], str]) -> Callable[[int], dict[str, str]]:
    def _auth_headers(user_id: int) -> dict[str, str]:
        return {'Authorization': f'Bearer {make_token(user_id)}'}

    return _auth_headers
