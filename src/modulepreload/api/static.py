"""Static file responder that attaches ``modulepreload`` link headers to served scripts."""

from __future__ import annotations

import logging
from pathlib import PurePath
from urllib.parse import quote

from starlette.requests import Request
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from modulepreload.config import ServerConfig
from modulepreload.core.graph import ResolutionFailure, resolve_graph
from modulepreload.core.languages import has_extension
from modulepreload.core.ports.loader import ModuleLoader
from modulepreload.core.preload import LINK_HEADER, build_link_header
from modulepreload.core.specifiers import relative_path
from modulepreload.loader.filesystem import FileSystemModuleLoader

logger = logging.getLogger(__name__)

RETRIEVAL_METHODS = frozenset({"GET", "HEAD"})
_SERVED_STATUSES = frozenset({200, 304})


def is_preload_candidate(method: str, status_code: int, path: str, script_extension: str = ".js") -> bool:
    return method in RETRIEVAL_METHODS and status_code in _SERVED_STATUSES and has_extension(path, script_extension)


class ModulePreloadStaticFiles(StaticFiles):
    """``StaticFiles`` serving the static root; scripts get their import closure as preload hints.

    A missing file raises the usual 404 ``HTTPException``. Graph resolution
    problems never affect the served response: the ``link`` header is just
    left out.
    """

    def __init__(self, config: ServerConfig, loader: ModuleLoader | None = None) -> None:
        super().__init__(directory=config.static_root, html=True, check_dir=False)
        self.config = config
        self.loader: ModuleLoader = loader or FileSystemModuleLoader()

    async def get_response(self, path: str, scope: Scope) -> Response:
        response = await super().get_response(path, scope)
        if is_preload_candidate(scope["method"], response.status_code, path, self.config.script_extension):
            try:
                await self._attach_link_header(path, scope, response)
            except Exception:
                logger.exception("Failed to build preload header for %s", path)
        return response

    async def _attach_link_header(self, path: str, scope: Scope, response: Response) -> None:
        base_uri = self.config.base_uri
        entry = f"{base_uri}/{quote(PurePath(path).as_posix())}"

        resolution = await resolve_graph(entry, base_uri, self.loader)
        if isinstance(resolution, ResolutionFailure):
            logger.warning(
                "Module graph resolution failed for %s at %s: %s", path, resolution.specifier, resolution.reason
            )
            return

        url = Request(scope).url
        value = build_link_header(
            resolution.graph,
            base_uri,
            request_path=relative_path(entry, base_uri),
            origin=f"{url.scheme}://{url.netloc}",
        )
        if value is not None:
            response.headers[LINK_HEADER] = value
            logger.debug("Preloading %d module(s) for %s", len(resolution.graph.modules) - 1, path)
