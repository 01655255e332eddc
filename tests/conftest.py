"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from modulepreload.config import ServerConfig

_REPO_ROOT = Path(__file__).parent.parent

# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def static_root(tmp_path: Path) -> Path:
    root = tmp_path / "packages"
    root.mkdir()
    return root


@pytest.fixture
def write_modules(static_root: Path) -> Callable[[dict[str, str]], None]:
    """Write ``{relative_path: source}`` below the static root, creating directories as needed."""

    def _write(modules: dict[str, str]) -> None:
        for rel, source in modules.items():
            path = static_root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")

    return _write


@pytest.fixture
def config(static_root: Path) -> ServerConfig:
    return ServerConfig(static_root=static_root)
