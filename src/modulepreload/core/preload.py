from modulepreload.core.specifiers import relative_path
from modulepreload.models import ModuleGraph

LINK_HEADER = "link"


def preload_paths(graph: ModuleGraph, base_uri: str, request_path: str) -> list[str]:
    """Site-relative paths of every module in ``graph`` except the requested one, sorted."""
    paths = {relative_path(module.specifier, base_uri) for module in graph.modules}
    paths.discard(request_path)
    return sorted(paths)


def build_link_header(graph: ModuleGraph, base_uri: str, request_path: str, origin: str) -> str | None:
    """Return the ``link`` header value for ``graph``, or ``None`` when nothing needs preloading."""
    entries = [f'<{origin}{path}>; rel="modulepreload"' for path in preload_paths(graph, base_uri, request_path)]
    if not entries:
        return None
    return ", ".join(entries)
