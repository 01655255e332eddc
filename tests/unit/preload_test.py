"""Unit tests for link header construction."""

from modulepreload.core.preload import build_link_header, preload_paths
from modulepreload.models import ModuleGraph, ModuleNode

BASE = "file:///srv/packages"
ORIGIN = "http://host"


def _graph(*rels: str) -> ModuleGraph:
    modules = [ModuleNode(specifier=f"{BASE}{rel}") for rel in rels]
    return ModuleGraph(root=modules[0].specifier, modules=modules)


def test_example_chain() -> None:
    header = build_link_header(_graph("/a.js", "/b.js", "/c.js"), BASE, "/a.js", ORIGIN)
    assert header == '<http://host/b.js>; rel="modulepreload", <http://host/c.js>; rel="modulepreload"'


def test_entry_only_yields_none() -> None:
    assert build_link_header(_graph("/c.js"), BASE, "/c.js", ORIGIN) is None


def test_entry_is_excluded_wherever_it_appears() -> None:
    graph = _graph("/z.js", "/a.js", "/m.js")
    assert preload_paths(graph, BASE, "/m.js") == ["/a.js", "/z.js"]


def test_entries_are_sorted() -> None:
    graph = _graph("/main.js", "/z/last.js", "/a/first.js", "/m.js")
    assert preload_paths(graph, BASE, "/main.js") == ["/a/first.js", "/m.js", "/z/last.js"]


def test_entry_count_is_graph_size_minus_one() -> None:
    rels = ["/entry.js"] + [f"/dep{i}.js" for i in range(7)]
    header = build_link_header(_graph(*rels), BASE, "/entry.js", ORIGIN)
    assert header is not None
    entries = header.split(", ")
    assert len(entries) == len(rels) - 1
    assert len(set(entries)) == len(entries)
    assert "<http://host/entry.js>" not in header


def test_origin_with_port() -> None:
    header = build_link_header(_graph("/a.js", "/lib/b.js"), BASE, "/a.js", "https://example.com:8443")
    assert header == '<https://example.com:8443/lib/b.js>; rel="modulepreload"'
