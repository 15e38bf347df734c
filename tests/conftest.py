"""Pytest configuration and fixtures."""

import random

import pytest
from httpx import ASGITransport, AsyncClient

from tinylink.config import Config
from tinylink.common.logging_config import setup_logging
from tinylink.service import LinkService
from tinylink.shortcode import ShortCodeGenerator
from tinylink.storage import LinkRepository, MemorySlot
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def slot():
    """Empty in-memory storage slot."""
    return MemorySlot()


@pytest.fixture
def short_code_generator():
    """Seeded short code generator."""
    return ShortCodeGenerator(default_length=6, rng=random.Random(1234))


@pytest.fixture
def repository(slot, short_code_generator, logger):
    """Link repository over the memory slot."""
    return LinkRepository(slot=slot, generator=short_code_generator, logger=logger)


@pytest.fixture
def service(repository, logger) -> LinkService:
    """Create service instance."""
    return LinkService(repository=repository, logger=logger)


@pytest.fixture
def config():
    """Test configuration (memory storage, no latency)."""
    return Config(
        storage_backend="memory",
        base_url="http://testserver",
        simulated_latency_ms=0,
    )


@pytest.fixture
def app(service, config):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
