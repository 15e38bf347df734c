#!/usr/bin/env python3
"""
Main entry point for the TinyLink service.

Usage:
    python app.py

Environment variables:
    STORAGE_BACKEND - memory, file or redis (default file)
    STORAGE_PATH - Directory for the file backend
    REDIS_URL - Redis connection URL (redis backend)
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    SIMULATED_LATENCY_MS - Artificial delay for management calls
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from tinylink.common.logging_config import setup_logging
from tinylink.factory import create_slot, create_service
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open storage on startup, close it on shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting TinyLink service...")

    slot = await create_slot(config, logger=logger)
    app.state.service = create_service(config, slot, logger=logger)

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down TinyLink service...")
    await app.state.service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("TinyLink Service")
    logger.info(f"Configuration: {config.model_dump()}")
    if config.workers > 1:
        logger.warning("workers > 1: link updates are not coordinated across processes")

    app = create_app(service_instance=None, config=config, lifespan=lifespan)
    app.state.logger = logger

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
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
