import re
from functools import cache
from pathlib import Path
from typing import cast

from tree_sitter import Node, Query, QueryCursor
from tree_sitter_language_pack import SupportedLanguage, get_language, get_parser

from modulepreload.core.errors import ModuleParseError

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")

_SINGLE_CHAR_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}

_LINE_CONTINUATIONS = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})


def _decode_escape(match: re.Match[str]) -> str:
    escape = match.group(1)
    if escape.startswith("u{"):
        return chr(int(escape[2:-1], 16))
    if escape[0] in "ux" and len(escape) > 1:
        return chr(int(escape[1:], 16))
    if escape in _LINE_CONTINUATIONS:
        return ""
    return _SINGLE_CHAR_ESCAPES.get(escape, escape)


def literal_value(literal: str) -> str:
    """Cooked value of a quoted or backtick JavaScript literal without substitutions."""
    decoded = _ESCAPE_RE.sub(_decode_escape, literal[1:-1])
    # \uD83D\uDE00 style surrogate pairs
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


@cache
def _load_query(language: str, query_type: str) -> Query:
    queries_dir = Path(__file__).parent.parent / "queries"
    query_path = queries_dir / f"{language}_{query_type}.scm"
    if not query_path.exists():
        raise FileNotFoundError(f"Query file not found: {query_path}")
    query_text = query_path.read_text(encoding="utf-8")
    return Query(get_language(cast(SupportedLanguage, language)), query_text)


def _first_syntax_error(node: Node) -> Node | None:
    if node.is_error or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_syntax_error(child)
        if found is not None:
            return found
    return node


def extract_import_specifiers(source_bytes: bytes, specifier: str, language: str = "javascript") -> list[str]:
    """Return the literal import targets of a module in source order, without duplicates.

    Static imports, re-exports and dynamic ``import()`` calls whose argument is a
    string or a template literal without substitutions are collected, with escape
    sequences decoded. Raises ``ModuleParseError`` when the source does not parse cleanly.
    """
    parser = get_parser(cast(SupportedLanguage, language))
    tree = parser.parse(source_bytes)

    root = tree.root_node
    if root.has_error:
        error_node = _first_syntax_error(root)
        row, column = error_node.start_point if error_node is not None else (0, 0)
        raise ModuleParseError(specifier, f"syntax error at line {row + 1}, column {column + 1}")

    captures = QueryCursor(_load_query(language, "imports")).captures(root)
    nodes = [node for captured in captures.values() for node in captured]
    nodes.sort(key=lambda node: node.start_byte)

    seen: set[str] = set()
    specifiers: list[str] = []
    for node in nodes:
        if any(child.type == "template_substitution" for child in node.children):
            continue
        literal = source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
        text = literal_value(literal)
        if text not in seen:
            seen.add(text)
            specifiers.append(text)
    return specifiers
