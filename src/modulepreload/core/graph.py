from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from modulepreload.core.errors import ModuleResolutionError
from modulepreload.core.imports import extract_import_specifiers
from modulepreload.core.languages import detect_language_from_path
from modulepreload.core.ports.loader import ModuleLoader
from modulepreload.core.specifiers import resolve_specifier
from modulepreload.models import ModuleGraph, ModuleNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedGraph:
    graph: ModuleGraph


@dataclass(frozen=True)
class ResolutionFailure:
    specifier: str
    reason: str


GraphResolution = ResolvedGraph | ResolutionFailure


async def _load_node(specifier: str, base_uri: str, loader: ModuleLoader) -> ModuleNode:
    source = await loader.load(specifier)
    language = detect_language_from_path(specifier)
    if language is None:
        return ModuleNode(specifier=specifier)

    # Parsing is CPU bound; keep it off the event loop like the read
    raw_specifiers = await asyncio.to_thread(extract_import_specifiers, source, specifier, language)

    dependencies: list[str] = []
    for raw in raw_specifiers:
        resolved = resolve_specifier(raw, specifier, base_uri)
        if resolved is None:
            logger.debug("Skipping external import %r in %s", raw, specifier)
        elif resolved not in dependencies:
            dependencies.append(resolved)
    return ModuleNode(specifier=specifier, dependencies=dependencies)


async def resolve_graph(entry: str, base_uri: str, loader: ModuleLoader) -> GraphResolution:
    """Resolve the import closure of ``entry``.

    Modules are visited depth-first in source order, each one loaded and parsed
    at most once, so cyclic imports terminate. The entry is always the first
    module of a resolved graph. Any read, parse or specifier error ends the
    traversal with a ``ResolutionFailure``.
    """
    visited: set[str] = set()
    modules: list[ModuleNode] = []
    pending = [entry]

    while pending:
        specifier = pending.pop()
        if specifier in visited:
            continue
        visited.add(specifier)

        try:
            node = await _load_node(specifier, base_uri, loader)
        except ModuleResolutionError as exc:
            return ResolutionFailure(specifier=exc.specifier, reason=exc.reason)

        modules.append(node)
        pending.extend(dep for dep in reversed(node.dependencies) if dep not in visited)

    return ResolvedGraph(graph=ModuleGraph(root=entry, modules=modules))
