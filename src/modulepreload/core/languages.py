from pathlib import PurePosixPath

_EXTENSION_LANGUAGE_MAP = {
    ".js": "javascript",
    ".mjs": "javascript",
}


def detect_language_from_path(path: str) -> str | None:
    """Return the grammar used to parse a module, or ``None`` for leaf resources (json, css, wasm)."""
    suffix = PurePosixPath(path).suffix.lower()
    return _EXTENSION_LANGUAGE_MAP.get(suffix)


def has_extension(path: str, extension: str) -> bool:
    """Exact, case-sensitive suffix match: ``A.JS`` is not a ``.js`` script."""
    return PurePosixPath(path).suffix == extension
