from __future__ import annotations

import asyncio
import logging

from modulepreload.core.errors import ModuleLoadError
from modulepreload.core.specifiers import uri_to_path

logger = logging.getLogger(__name__)


class FileSystemModuleLoader:
    """Read module sources from ``file://`` locations.

    Implements the ``ModuleLoader`` protocol. Reads run in a worker thread so a
    request resolving a large graph yields the event loop between files.
    """

    async def load(self, specifier: str) -> bytes:
        path = uri_to_path(specifier)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            raise ModuleLoadError(specifier, "module not found") from None
        except IsADirectoryError:
            raise ModuleLoadError(specifier, "is a directory") from None
        except OSError as exc:
            logger.debug("Failed to read %s", path, exc_info=True)
            raise ModuleLoadError(specifier, exc.strerror or str(exc)) from exc
