from modulepreload.core.errors import ModuleLoadError


class InMemoryModuleLoader:
    """Serve module sources from a dict keyed by ``file://`` location."""

    def __init__(self, sources: dict[str, str | bytes] | None = None) -> None:
        self.sources: dict[str, bytes] = {}
        self.loads: list[str] = []
        for specifier, source in (sources or {}).items():
            self.add(specifier, source)

    def add(self, specifier: str, source: str | bytes) -> None:
        self.sources[specifier] = source.encode("utf-8") if isinstance(source, str) else source

    def remove(self, specifier: str) -> None:
        self.sources.pop(specifier, None)

    async def load(self, specifier: str) -> bytes:
        self.loads.append(specifier)
        try:
            return self.sources[specifier]
        except KeyError:
            raise ModuleLoadError(specifier, "module not found") from None
