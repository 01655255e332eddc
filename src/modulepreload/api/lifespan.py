from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from modulepreload.config import ServerConfig

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config: ServerConfig = app.state.config
    if config.static_root.is_dir():
        logger.info("Serving modules from %s", config.static_root)
    else:
        logger.warning("Static root %s does not exist or is not a directory", config.static_root)
    yield
