"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator, Callable, Iterable

from httpx import ASGITransport, AsyncClient

from config import Config
from shortlinks.directory import ShortLinkDirectory
from shortlinks.keygen import KeyGenerator
from shortlinks.storage.memory import InMemoryMappingStore
from shortlinks.common.logging_config import setup_logging
from shortlinks_web import create_app


def sequence_source(chunks: Iterable[bytes]) -> Callable[[int], bytes]:
    """Random source returning the given byte strings in order."""
    it = iter(chunks)

    def source(n: int) -> bytes:
        return next(it)

    return source


def failing_source(n: int) -> bytes:
    """Random source that is never available."""
    raise OSError("entropy pool unavailable")


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def key_generator():
    """Create key generator."""
    return KeyGenerator()


@pytest.fixture
def storage(logger):
    """Create empty in-memory storage."""
    return InMemoryMappingStore(logger=logger)


@pytest.fixture
def directory(storage, key_generator, logger) -> ShortLinkDirectory:
    """Create directory instance."""
    return ShortLinkDirectory(
        storage=storage,
        key_generator=key_generator,
        logger=logger,
    )


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(base_url="http://testserver")


@pytest.fixture
def app(directory, config, logger):
    """Create test FastAPI app."""
    return create_app(
        directory=directory,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
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
        "http://stackoverflow.com/questions/123456",
    ]
