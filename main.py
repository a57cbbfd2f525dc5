from __future__ import annotations

import logging

import uvicorn

from tasktracker.config import load_config_from_env
from tasktracker.logging_setup import setup_logging
from tasktracker.presentation.app import create_app

logger = logging.getLogger("tasktracker")

config = load_config_from_env()

app = create_app(cors_allow_origins=config.cors_allow_origins)


if __name__ == "__main__":
    setup_logging(level=config.log_level)
    logger.info("Server is running on port %s...", config.port)

    # Pass the object itself, the task store lives inside it.
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_config=None,
    )
