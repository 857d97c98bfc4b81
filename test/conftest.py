"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database (aiosqlite) shared by the test app
- Table cleanup between integration tests (the seeded admin is kept)
- Session-scoped TestClient and user/token fixtures

Architecture:
- Unit tests (test/**/unit/): Override fixtures with no-ops in their own conftest.py
- Integration tests: Drive the HTTP API against the real database
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so DATABASE_URL and the admin account
# must be in the environment before src.* is imported.
# =============================================================================
import os
from pathlib import Path


_TEST_DIR = Path(__file__).parent
_TEST_DB_PATH = _TEST_DIR / 'test_museum.db'


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_path = _TEST_DB_PATH if worker_id == 'master' else _TEST_DIR / f'test_museum_{worker_id}.db'
    if db_path.exists():
        db_path.unlink()
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'

    # Create test log directory
    test_log_dir = _TEST_DIR / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['SECRET_KEY'] = 'test_secret_key_for_pytest_only'
    os.environ['ADMIN_EMAIL'] = 'admin@museum.test'
    os.environ['ADMIN_PASSWORD'] = 'Adm1nP@ss'
    os.environ['ADMIN_NAME'] = 'Test Administrator'
    os.environ['RAZORPAY_KEY_ID'] = ''
    os.environ['RAZORPAY_KEY_SECRET'] = ''


# Call immediately to set env vars before any imports
_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import Generator  # noqa: E402
from datetime import date  # noqa: E402
from typing import Any, Dict  # noqa: E402

from dotenv import load_dotenv  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from test.shared.utils import create_user, login_user, next_open_day  # noqa: E402
from test.util_constant import (  # noqa: E402
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    ANOTHER_VISITOR_EMAIL,
    ANOTHER_VISITOR_NAME,
    DEFAULT_PASSWORD,
    TEST_EMAIL,
    TEST_VISITOR_NAME,
)


# Load the remaining defaults from .env or .env.example (explicit env vars above win)
env_file = '.env' if Path('.env').exists() else '.env.example'
load_dotenv(env_file)

TEST_DATABASE_URL = os.environ['DATABASE_URL']

# Child tables first
_TABLES_TO_CLEAN = ('booking_line_item', 'booking', 'exhibition')


async def clean_all_tables() -> None:
    engine = create_async_engine(TEST_DATABASE_URL)
    try:
        async with engine.begin() as conn:
            for table in _TABLES_TO_CLEAN:
                await conn.execute(text(f'DELETE FROM "{table}"'))
            await conn.execute(text('DELETE FROM "user" WHERE role != :role'), {'role': 'admin'})
    finally:
        await engine.dispose()


@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_database(client: TestClient) -> Generator[None, None, None]:
    asyncio.run(clean_all_tables())
    yield


@pytest.fixture
def execute_sql_statement():
    def _execute(statement: str, params: dict | None = None, fetch: bool = False):
        async def _run():
            engine = create_async_engine(TEST_DATABASE_URL)
            try:
                async with engine.begin() as conn:
                    result = await conn.execute(text(statement), params or {})
                    if fetch:
                        return [dict(row._mapping) for row in result]
            finally:
                await engine.dispose()
            return None

        return asyncio.run(_run())

    return _execute


# =============================================================================
# Users and tokens
# =============================================================================
@pytest.fixture
def visitor(client: TestClient) -> Dict[str, Any]:
    """Signed-up visitor: {'token': ..., 'user': {...}}"""
    return create_user(client, TEST_EMAIL, DEFAULT_PASSWORD, TEST_VISITOR_NAME)


@pytest.fixture
def another_visitor(client: TestClient) -> Dict[str, Any]:
    return create_user(client, ANOTHER_VISITOR_EMAIL, DEFAULT_PASSWORD, ANOTHER_VISITOR_NAME)


@pytest.fixture
def admin(client: TestClient) -> Dict[str, Any]:
    """The administrator seeded at startup"""
    return login_user(client, ADMIN_EMAIL, ADMIN_PASSWORD).json()


@pytest.fixture
def visit_date() -> date:
    return next_open_day(date.today(), days_ahead=7)
