"""Mapping of ES module import specifiers onto ``file://`` locations under the static root."""

from pathlib import Path
from urllib.parse import quote, unquote, urljoin, urlsplit

from modulepreload.core.errors import SpecifierError

# Imports of these schemes are left to the browser and never traversed.
_EXTERNAL_SCHEMES = frozenset({"http", "https", "data", "blob"})


def path_to_uri(path: Path) -> str:
    return _canonical_file_uri("file://" + path.as_posix())


def uri_to_path(uri: str) -> Path:
    return Path(unquote(urlsplit(uri).path))


def _canonical_file_uri(uri: str) -> str:
    parts = urlsplit(uri)
    if parts.netloc not in ("", "localhost"):
        raise SpecifierError(uri, f"file URL with remote host '{parts.netloc}'")
    return "file://" + quote(unquote(parts.path), safe="/")


def _has_scheme(specifier: str) -> bool:
    scheme = urlsplit(specifier).scheme
    return len(scheme) > 1 and specifier.startswith(f"{scheme}:")


def is_within_root(uri: str, base_uri: str) -> bool:
    return uri == base_uri or uri.startswith(base_uri + "/")


def resolve_specifier(specifier: str, referrer: str, base_uri: str) -> str | None:
    """Resolve ``specifier`` imported by ``referrer``.

    Returns the canonical ``file://`` location, or ``None`` for external URLs
    (http, https, data, blob). Root-relative specifiers (``/x.js``) resolve
    against the static root, as the browser would request them from the site root.
    """
    if specifier.startswith("//"):
        return None
    if specifier.startswith("/"):
        resolved = urljoin(base_uri + "/", "." + specifier)
    elif specifier.startswith(("./", "../")) or specifier in (".", ".."):
        resolved = urljoin(referrer, specifier)
    elif _has_scheme(specifier):
        scheme = urlsplit(specifier).scheme.lower()
        if scheme in _EXTERNAL_SCHEMES:
            return None
        if scheme != "file":
            raise SpecifierError(specifier, f"unsupported URL scheme '{scheme}'")
        resolved = specifier
    else:
        raise SpecifierError(specifier, 'bare specifier; expected a path starting with "/", "./" or "../"')

    uri = _canonical_file_uri(resolved)
    if not is_within_root(uri, base_uri):
        raise SpecifierError(specifier, "resolves outside the static root")
    return uri


def relative_path(uri: str, base_uri: str) -> str:
    """Site-relative path of a module location (leading slash, no scheme or host)."""
    return uri.removeprefix(base_uri) or "/"
