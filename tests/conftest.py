"""Pytest configuration and fixtures"""
import asyncio
from typing import Iterable, Optional

import pytest
from fastapi.testclient import TestClient

from cart_service.main import create_app
from cart_service.store import CartStore
from shared.config import Settings

KNOWN_CUSTOMER = 999
UNKNOWN_CUSTOMER = 404


class FakeCustomerDirectory:
    """Stands in for the customer service; records every existence check."""

    def __init__(self, known: Iterable[int] = (KNOWN_CUSTOMER,), error: Optional[Exception] = None):
        self.known = set(known)
        self.error = error
        self.calls = []

    async def exists(self, customer_id: int) -> bool:
        self.calls.append(customer_id)
        # yield to the loop so concurrent requests interleave here
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return customer_id in self.known


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(customer_service_url="http://customers.test")


@pytest.fixture
def store() -> CartStore:
    return CartStore()


@pytest.fixture
def directory() -> FakeCustomerDirectory:
    return FakeCustomerDirectory()


@pytest.fixture
def app(store, directory, settings):
    return create_app(store=store, directory=directory, settings=settings)


@pytest.fixture
def test_client(app) -> TestClient:
    return TestClient(app)
