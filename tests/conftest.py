"""Global test configuration and fixtures for the Boat Identifier API."""

import base64
import random
from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.database.connection import init_models
from src.modules.classification.service import ImageClassifier
from src.modules.vessels.service import VesselDirectory
from tests.factories import FeedbackFactory, IdentificationFactory

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kg"
    "AAAABJRU5ErkJggg=="
)


@pytest.fixture
def identification_factory():
    return IdentificationFactory


@pytest.fixture
def feedback_factory():
    return FeedbackFactory


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest_asyncio.fixture
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """A fresh SQLite file database per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=async_engine, class_=AsyncSession, expire_on_commit=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def image_classifier() -> ImageClassifier:
    """Classifier with no Vision client, so always synthetic."""
    return ImageClassifier()


@pytest.fixture
def vessel_directory() -> VesselDirectory:
    """Directory with no live registries, so always demo data."""
    return VesselDirectory(registries=[], rng=random.Random(0))


@pytest.fixture
def app(
    session_factory, upload_dir, image_classifier, vessel_directory
) -> FastAPI:
    """The application with test state in place of what the lifespan builds."""
    from src.main import app

    app.state.session_factory = session_factory
    app.state.upload_dir = upload_dir
    app.state.image_classifier = image_classifier
    app.state.vessel_directory = vessel_directory
    return app


@pytest_asyncio.fixture
async def stub_server() -> AsyncGenerator[Callable, None]:
    """Start local aiohttp servers that answer every path with ``handler``."""
    servers: list[TestServer] = []

    async def start(handler) -> TestServer:
        stub_app = web.Application()
        stub_app.router.add_route("*", "/{tail:.*}", handler)
        server = TestServer(stub_app)
        await server.start_server()
        servers.append(server)
        return server

    yield start

    for server in servers:
        await server.close()


@pytest_asyncio.fixture
async def closed_url(stub_server) -> str:
    """URL of a port nothing listens on any more."""

    async def unused(request: web.Request) -> web.Response:
        return web.Response()

    server = await stub_server(unused)
    url = str(server.make_url("/"))
    await server.close()
    return url


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test-boat-identifier-api",
    ) as ac:
        yield ac
