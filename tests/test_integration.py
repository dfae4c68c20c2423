"""Integration tests for the assembled service."""

import pytest
from httpx import ASGITransport, AsyncClient

import app as entrypoint
from config import Config
from shortlinks.common.logging_config import setup_logging
from shortlinks_web import create_app


@pytest.mark.asyncio
class TestIntegration:
    """End-to-end tests through the entry point's wiring."""

    async def test_full_lifecycle(self):
        """Create via plain text, inspect via API, redirect, then shut down."""
        logger = setup_logging(level="DEBUG")
        config = Config(base_url="http://testserver", max_collision_retries=3)

        directory = entrypoint.build_directory(config, logger)
        assert directory.max_collision_retries == 3

        app = create_app(
            directory=directory,
            config=config,
            lifespan=entrypoint.lifespan,
            logger=logger,
        )

        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                # 1. Create short URL via the plain-text surface
                created = await client.post("/", content="example.com/lifecycle")
                assert created.status_code == 201
                key = created.text.rsplit("/", 1)[-1]

                # 2. Inspect via API
                info = await client.get(f"/api/urls/{key}")
                assert info.status_code == 200
                assert info.json()["target"] == "http://example.com/lifecycle"

                # 3. Redirect
                redirect = await client.get(f"/{key}")
                assert redirect.status_code == 307
                assert redirect.headers["location"] == "http://example.com/lifecycle"

                # 4. Health reflects the stored mapping
                health = await client.get("/api/health")
                assert health.json()["mappings"] == 1

        # Shutdown discards the in-memory mapping
        assert await directory.count() == 0

    async def test_separate_directories_are_isolated(self):
        """Two apps built from separate directories share no state."""
        logger = setup_logging(level="DEBUG")
        config = Config(base_url="http://testserver")

        first = create_app(entrypoint.build_directory(config, logger), config, logger=logger)
        second = create_app(entrypoint.build_directory(config, logger), config, logger=logger)

        async with AsyncClient(transport=ASGITransport(app=first), base_url="http://testserver") as a, \
                AsyncClient(transport=ASGITransport(app=second), base_url="http://testserver") as b:
            created = await a.post("/", content="https://example.com/only-first")
            key = created.text.rsplit("/", 1)[-1]

            assert (await a.get(f"/{key}")).status_code == 307
            assert (await b.get(f"/{key}")).status_code == 404
