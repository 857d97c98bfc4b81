"""
Unit test configuration for the museum service.

Overrides autouse fixtures from the parent conftest so unit tests run
without the database and without starting the TestClient lifespan.
"""

from collections.abc import Generator
from datetime import date, datetime, timezone
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
import pytest

from src.service.museum.domain.entity.exhibition_entity import Exhibition
from src.service.museum.domain.entity.user_entity import UserEntity, UserRole


# A Wednesday, so visit dates around it are easy to reason about
TODAY = date(2026, 10, 21)


@pytest.fixture(autouse=True, scope='function')
def clean_database() -> Generator[None, None, None]:
    """No-op override for unit tests - no real database needed"""
    yield


@pytest.fixture(scope='session')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - prevents TestClient/lifespan from being created"""
    mock_client = MagicMock(spec=TestClient)
    yield mock_client


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def exhibition() -> Exhibition:
    return Exhibition(
        id=1,
        name='Impressionist Masters',
        description='Monet, Renoir and Degas',
        start_date=date(2026, 10, 1),
        end_date=date(2026, 12, 31),
        price=15,
    )


@pytest.fixture
def visitor_entity() -> UserEntity:
    return UserEntity(
        id=2,
        email='visitor@example.com',
        name='Test Visitor',
        hashed_password='$2b$12$hash',
        role=UserRole.USER,
        created_at=datetime(2026, 10, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def admin_entity() -> UserEntity:
    return UserEntity(
        id=1,
        email='admin@museum.test',
        name='Administrator',
        hashed_password='$2b$12$hash',
        role=UserRole.ADMIN,
    )
