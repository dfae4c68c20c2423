#!/usr/bin/env python3
"""
Main entry point for the short-link service.

Concurrency: requests are handled as tasks on a single uvicorn event loop.
The mapping lives in process memory, so the service always runs one worker
process; the directory's reader/writer lock guards it across tasks.

Usage:
    python app.py

Environment variables:
    HOST - Host to bind to
    PORT - Port to listen on
    BASE_URL - Base URL for short links
    PATH_PREFIX - Path prefix for short links
    MAX_COLLISION_RETRIES - Extra key draws on collision
    LOG_LEVEL - Logging level
    LOG_FILE - Optional log file
    LOG_JSON - Set to true for JSON log lines
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortlinks.directory import ShortLinkDirectory
from shortlinks.keygen import KeyGenerator
from shortlinks.storage.memory import InMemoryMappingStore
from shortlinks.common.logging_config import setup_logging
from shortlinks_web import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger
    directory = app.state.directory

    logger.info("Short-link service started")

    yield

    logger.info(f"Shutting down; {await directory.count()} mappings will be discarded")
    await directory.close()
    logger.info("Service stopped")


def build_directory(config: Config, logger) -> ShortLinkDirectory:
    """Construct the directory with in-memory storage."""
    return ShortLinkDirectory(
        storage=InMemoryMappingStore(logger=logger),
        key_generator=KeyGenerator(),
        logger=logger,
        max_collision_retries=config.max_collision_retries,
    )


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Short-Link Service")
    logger.info(f"Configuration: {config.model_dump()}")

    directory = build_directory(config, logger)

    app = create_app(
        directory=directory,
        config=config,
        lifespan=lifespan,
        logger=logger,
    )

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=1,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
