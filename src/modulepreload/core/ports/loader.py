from typing import Protocol


class ModuleLoader(Protocol):
    async def load(self, specifier: str) -> bytes: ...
