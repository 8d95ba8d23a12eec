"""Shared test fixtures and utilities for all tests."""
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.containers import Container
from src.client import BankingClient
from src.shared.database.database import Database, DatabaseSettings


@pytest.fixture(scope="function")
def db_url(tmp_path):
    """SQLite database file private to the current test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'banking_control_panel.db'}"


@pytest_asyncio.fixture(scope="function")
async def db(db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=db_url))
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Clean the database before each test.
    Drops and recreates all tables.
    """
    await db.drop_schema()
    await db.create_schema()
    yield db


@pytest.fixture(scope="function")
def test_container(clean_database):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.

    Overrides the container's database singleton with the test database.
    """
    container = Container()
    container.database.override(providers.Object(clean_database))

    container.wire(modules=[
        "src.app.api.v1.clients",
    ])
    yield container
    container.database.reset_override()
    container.unwire()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """
    from src.app.main import create_app

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Database tables are already created by clean_database fixture
        yield

    yield create_app(test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def banking_client(test_app):
    """
    Create an API client for testing.
    test_app already depends on clean_database for test isolation.
    """
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = BankingClient(base_url="http://test", client=http_client)

    async with client:
        yield client
    await http_client.aclose()


# =========================================================================
# Persistence fixtures (available to all test directories)
# =========================================================================

@pytest.fixture
def unit_of_work(test_container):
    """Get a unit of work bound to the clean test database."""
    return test_container.unit_of_work()


@pytest.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()
