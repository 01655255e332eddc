"""Unit tests for import specifier resolution."""

from pathlib import Path

import pytest

from modulepreload.core.errors import SpecifierError
from modulepreload.core.specifiers import (
    is_within_root,
    path_to_uri,
    relative_path,
    resolve_specifier,
    uri_to_path,
)

BASE = "file:///srv/packages"
REFERRER = "file:///srv/packages/app/main.js"


class TestResolveSpecifier:
    def test_sibling(self) -> None:
        assert resolve_specifier("./util.js", REFERRER, BASE) == "file:///srv/packages/app/util.js"

    def test_parent_directory(self) -> None:
        assert resolve_specifier("../lib/x.js", REFERRER, BASE) == "file:///srv/packages/lib/x.js"

    def test_dot_segments_are_collapsed(self) -> None:
        assert resolve_specifier("./a/../b/./c.js", REFERRER, BASE) == "file:///srv/packages/app/b/c.js"

    def test_root_relative_resolves_against_static_root(self) -> None:
        assert resolve_specifier("/shared/x.js", REFERRER, BASE) == "file:///srv/packages/shared/x.js"

    def test_absolute_file_url_inside_root(self) -> None:
        assert resolve_specifier("file:///srv/packages/z.js", REFERRER, BASE) == "file:///srv/packages/z.js"

    def test_query_and_fragment_are_dropped(self) -> None:
        assert resolve_specifier("./util.js?v=2#top", REFERRER, BASE) == "file:///srv/packages/app/util.js"

    def test_spaces_are_percent_encoded(self) -> None:
        assert resolve_specifier("./my file.js", REFERRER, BASE) == "file:///srv/packages/app/my%20file.js"

    def test_encoded_and_raw_forms_are_identical(self) -> None:
        raw = resolve_specifier("./my file.js", REFERRER, BASE)
        encoded = resolve_specifier("./my%20file.js", REFERRER, BASE)
        assert raw == encoded

    @pytest.mark.parametrize(
        "specifier",
        [
            "https://cdn.example.com/lib.js",
            "http://example.com/x.js",
            "//cdn.example.com/lib.js",
            "data:text/javascript,export default 1",
            "blob:https://example.com/1234",
        ],
    )
    def test_external_urls_are_skipped(self, specifier: str) -> None:
        assert resolve_specifier(specifier, REFERRER, BASE) is None

    def test_bare_specifier_is_an_error(self) -> None:
        with pytest.raises(SpecifierError, match="bare specifier"):
            resolve_specifier("lodash", REFERRER, BASE)

    def test_unsupported_scheme_is_an_error(self) -> None:
        with pytest.raises(SpecifierError, match="unsupported URL scheme"):
            resolve_specifier("node:fs", REFERRER, BASE)

    def test_escaping_the_root_is_an_error(self) -> None:
        with pytest.raises(SpecifierError, match="outside the static root"):
            resolve_specifier("../../etc/passwd.js", REFERRER, BASE)

    def test_root_relative_cannot_escape(self) -> None:
        with pytest.raises(SpecifierError, match="outside the static root"):
            resolve_specifier("/../secret.js", REFERRER, BASE)

    def test_sibling_directory_with_common_prefix_is_outside(self) -> None:
        with pytest.raises(SpecifierError):
            resolve_specifier("file:///srv/packages-private/x.js", REFERRER, BASE)


class TestPaths:
    def test_relative_path(self) -> None:
        assert relative_path("file:///srv/packages/app/main.js", BASE) == "/app/main.js"

    def test_within_root(self) -> None:
        assert is_within_root("file:///srv/packages/a.js", BASE)
        assert not is_within_root("file:///srv/packagesX/a.js", BASE)

    def test_path_to_uri_round_trip(self) -> None:
        path = Path("/srv/packages/my dir/a.js")
        uri = path_to_uri(path)
        assert uri == "file:///srv/packages/my%20dir/a.js"
        assert uri_to_path(uri) == path
